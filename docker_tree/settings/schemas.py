"""Дефолтная схема файла конфигурации."""

from __future__ import annotations

from typing import Any, Dict

# Разделы explorer остаются "сырыми": их проверяет validate_settings при сборке дерева
DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    "logging": {
        "level": "WARNING",
        "log_dir": None,
        "max_file_size_mb": 10,
        "max_archived_files": 5,
    },
    "docker": {
        "base_url": None,
        "timeout_sec": 10,
    },
    "explorer": {
        "containers": {},
        "images": {},
        "volumes": {},
        "networks": {},
    },
}
