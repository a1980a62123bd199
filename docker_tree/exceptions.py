"""Исключения движка построения дерева ресурсов."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

LOGGER = logging.getLogger(__name__)


class TreeError(Exception):
    """Базовое исключение движка с поддержкой контекста."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        """Сохраняет сообщение и контекст, логируя ошибку."""

        self.message = message
        self.context = context or {}
        super().__init__(message)
        LOGGER.error("%s | context=%s", message, self.context)


class UnknownResourceKindError(TreeError):
    """Запрошен вид ресурса, для которого нет адаптера."""

    def __init__(self, kind: Any, known: Iterable[str]) -> None:
        self.kind = kind
        super().__init__(
            f"Unknown resource kind {kind!r}",
            context={"kind": kind, "known": sorted(known)},
        )


class UnknownFormatKeyError(TreeError):
    """Адаптер не умеет форматировать запрошенный ключ."""

    def __init__(self, kind: str, key: str) -> None:
        self.kind = kind
        self.key = key
        super().__init__(
            f"Format key '{key}' is not supported for {kind}",
            context={"kind": kind, "key": key},
        )


class ConfigFileError(TreeError):
    """Поднимается при ошибках чтения или разбора файла конфигурации."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(
            f"Cannot load config file '{path}': {reason}",
            context={"path": str(path), "reason": reason},
        )


class ConfigValidationError(TreeError):
    """Сигнализирует о некорректном значении в файле конфигурации."""

    def __init__(self, key: str, value: Any, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(
            f"Validation error for '{key}': {reason} (value={value!r})",
            context={"key": key, "value": value, "reason": reason},
        )
