"""Различные вспомогательные функции."""

from __future__ import annotations

from typing import Any, Optional

_SOCKET_SCHEMES = ("unix://", "tcp://", "npipe://", "http://", "https://", "ssh://")
_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


def normalize_socket_path(raw_value: str) -> str:
    """Возвращает адрес Docker с корректным префиксом unix:// для путей сокета."""

    value = raw_value.strip()
    if not value:
        return value
    if value.lower().startswith(_SOCKET_SCHEMES):
        return value
    if value.startswith("/"):
        return f"unix://{value}"
    return value


def format_bytes(value: Optional[Any]) -> str:
    """Форматирует размер в байтах в удобочитаемый вид."""

    try:
        numeric = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return "N/A"
    index = 0
    while numeric >= 1024 and index < len(_SIZE_UNITS) - 1:
        numeric /= 1024.0
        index += 1
    return f"{numeric:.1f} {_SIZE_UNITS[index]}"
