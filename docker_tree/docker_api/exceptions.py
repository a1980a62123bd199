"""Исключения при обращении к Docker Engine."""

from __future__ import annotations

import logging

LOGGER = logging.getLogger(__name__)


class DockerAPIError(Exception):
    """Ошибка получения данных от Docker Engine."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
        LOGGER.error("Docker API error: %s", message)
