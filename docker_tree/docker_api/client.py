"""Обёртка над низкоуровневым клиентом docker-py."""

from __future__ import annotations

import logging
from typing import Any, Optional

import docker
from docker.errors import DockerException
from requests.exceptions import RequestException

from docker_tree.docker_api.exceptions import DockerAPIError
from docker_tree.utils.helpers import normalize_socket_path

LOGGER = logging.getLogger(__name__)


class DockerClientWrapper:
    """Создаёт docker.APIClient и отдаёт его функциям получения описаний."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: int = 10,
        raw_client: Any | None = None,
    ) -> None:
        self.base_url = normalize_socket_path(base_url) if base_url else None
        self.timeout = timeout
        self._client = raw_client or self._create_client()

    def _create_client(self) -> Any:
        try:
            if self.base_url:
                return docker.APIClient(base_url=self.base_url, timeout=self.timeout)
            # DOCKER_HOST, DOCKER_TLS_VERIFY и т.д.
            return docker.from_env(timeout=self.timeout).api
        except DockerException as exc:
            LOGGER.error(
                "Docker client init error for %s: %s", self.base_url or "environment", exc
            )
            raise DockerAPIError(str(exc)) from exc

    def get_raw_client(self) -> Any:
        """Возвращает внутренний APIClient."""

        return self._client

    def ping(self) -> bool:
        """Проверяет доступность Docker."""

        try:
            self._client.ping()
            return True
        except (DockerException, RequestException) as exc:
            LOGGER.error("Docker ping failed: %s", exc)
            return False
