"""Загрузка JSON-конфигурации с наложением на значения по умолчанию."""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from docker_tree.exceptions import ConfigFileError, ConfigValidationError
from docker_tree.settings.schemas import DEFAULT_CONFIG
from docker_tree.settings.validators import (
    CompositeValidator,
    EnumValidator,
    RangeValidator,
    TypeValidator,
    Validator,
)

LOGGER = logging.getLogger(__name__)

# Ключи, ошибка в которых делает конфигурацию непригодной
_VALIDATORS: Dict[str, Dict[str, Validator]] = {
    "logging": {
        "level": EnumValidator(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
        "log_dir": TypeValidator((str, type(None))),
        "max_file_size_mb": CompositeValidator([TypeValidator(int), RangeValidator(1, 1000)]),
        "max_archived_files": CompositeValidator([TypeValidator(int), RangeValidator(1, 50)]),
    },
    "docker": {
        "base_url": TypeValidator((str, type(None))),
        "timeout_sec": CompositeValidator([TypeValidator(int), RangeValidator(1, 600)]),
    },
    "explorer": {},
}


def merge_with_defaults(incoming: Dict[str, Any]) -> Dict[str, Any]:
    """Накладывает пользовательские разделы на копию DEFAULT_CONFIG."""

    base = copy.deepcopy(DEFAULT_CONFIG)
    for key, value in incoming.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key].update(value)
        else:
            base[key] = value
    return base


def validate_config(config: Dict[str, Any]) -> None:
    """Проверяет служебные разделы; разделы explorer проверяются при сборке дерева."""

    for group, validators in _VALIDATORS.items():
        section = config.get(group)
        if not isinstance(section, dict):
            raise ConfigValidationError(group, section, "section must be an object")
        for key, validator in validators.items():
            value = section.get(key)
            is_valid, error = validator.validate(value)
            if not is_valid:
                raise ConfigValidationError(f"{group}.{key}", value, error)


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Читает файл конфигурации; без пути возвращает значения по умолчанию."""

    if path is None:
        return copy.deepcopy(DEFAULT_CONFIG)
    try:
        content = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigFileError(path, str(exc)) from exc
    if not isinstance(content, dict):
        raise ConfigFileError(path, "top-level value must be an object")

    config = merge_with_defaults(content)
    validate_config(config)
    LOGGER.debug("Loaded config from %s", path)
    return config


def explorer_settings(config: Dict[str, Any], kind: str) -> Any:
    """Сырые настройки дерева для вида ресурса (как есть, без проверки)."""

    explorer = config.get("explorer")
    if not isinstance(explorer, dict):
        return None
    return explorer.get(kind)
