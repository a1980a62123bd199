"""Проверка пользовательских настроек дерева против таблиц адаптера.

Настройки приходят из внешнего хранилища без какой-либо гарантии формы.
``validate_settings`` проверяет каждое поле отдельно и при любой ошибке
подставляет значение по умолчанию, никогда не выбрасывая исключений.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from docker_tree.adapters.base import GROUP_NONE, ResourceAdapter
from docker_tree.settings.validators import (
    CompositeValidator,
    EnumValidator,
    SequenceValidator,
    TypeValidator,
    Validator,
)

LOGGER = logging.getLogger(__name__)

LABEL_FIELD = "label"
DESCRIPTION_FIELD = "description"
GROUP_BY_FIELD = "groupBy"
SORT_BY_FIELD = "sortBy"


@dataclass(frozen=True, slots=True)
class TreeSettings:
    """Полностью заполненные и согласованные настройки одного дерева."""

    label_key: str
    description_keys: Tuple[str, ...]
    group_by_key: Optional[str]
    sort_by_key: str


def default_settings(adapter: ResourceAdapter) -> TreeSettings:
    """Настройки по умолчанию для адаптера."""

    return TreeSettings(
        label_key=adapter.default_label_key,
        description_keys=tuple(adapter.default_description_keys),
        group_by_key=None,
        sort_by_key=adapter.default_sort_by_key,
    )


def _key_validator(allowed: Tuple[str, ...]) -> Validator:
    return CompositeValidator([TypeValidator(str), EnumValidator(allowed)])


def _check(field: str, validator: Validator, value: Any, adapter: ResourceAdapter) -> bool:
    is_valid, error = validator.validate(value)
    if not is_valid:
        LOGGER.debug("Ignoring %s.%s setting: %s", adapter.kind, field, error)
    return is_valid


def _validate_description(raw: Any, adapter: ResourceAdapter) -> Tuple[str, ...]:
    defaults = tuple(adapter.default_description_keys)
    if not _check(DESCRIPTION_FIELD, SequenceValidator(), raw, adapter):
        return defaults
    if len(raw) == 0:
        # пустой список означает "без описания"
        return ()
    key_validator = _key_validator(adapter.valid_description_keys)
    keys = tuple(key for key in raw if _check(DESCRIPTION_FIELD, key_validator, key, adapter))
    return keys or defaults


def validate_settings(raw: Any, adapter: ResourceAdapter) -> TreeSettings:
    """Возвращает TreeSettings, заменяя отсутствующие и неверные поля дефолтами."""

    defaults = default_settings(adapter)
    if raw is None:
        return defaults
    if not isinstance(raw, Mapping):
        LOGGER.debug(
            "Ignoring %s settings: expected mapping, got %s", adapter.kind, type(raw).__name__
        )
        return defaults

    label_key = defaults.label_key
    if LABEL_FIELD in raw:
        value = raw[LABEL_FIELD]
        if _check(LABEL_FIELD, _key_validator(adapter.valid_label_keys), value, adapter):
            label_key = value

    description_keys = defaults.description_keys
    if DESCRIPTION_FIELD in raw:
        description_keys = _validate_description(raw[DESCRIPTION_FIELD], adapter)

    group_by_key = None
    if GROUP_BY_FIELD in raw:
        value = raw[GROUP_BY_FIELD]
        if _check(GROUP_BY_FIELD, _key_validator(adapter.valid_group_by_keys), value, adapter):
            group_by_key = None if value == GROUP_NONE else value

    sort_by_key = defaults.sort_by_key
    if SORT_BY_FIELD in raw:
        value = raw[SORT_BY_FIELD]
        if _check(SORT_BY_FIELD, _key_validator(adapter.valid_sort_by_keys), value, adapter):
            sort_by_key = value

    return TreeSettings(
        label_key=label_key,
        description_keys=description_keys,
        group_by_key=group_by_key,
        sort_by_key=sort_by_key,
    )
