"""Базовый адаптер вида ресурса: допустимые ключи, значения по умолчанию и форматтеры."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Tuple

from docker_tree.descriptors.models import DEFAULT_REGISTRY, ImageReference, NormalizedItem
from docker_tree.exceptions import UnknownFormatKeyError

Formatter = Callable[[NormalizedItem], str]

CREATED_TIME = "CreatedTime"
LABEL = "Label"
GROUP_NONE = "None"
SORT_BY_KEYS: Tuple[str, ...] = (CREATED_TIME, LABEL)
EMPTY_PLACEHOLDER = "<none>"

_MISSING_REFERENCE = ImageReference(registry=DEFAULT_REGISTRY, repository=EMPTY_PLACEHOLDER)


class ResourceAdapter(ABC):
    """Неизменяемая таблица ключей для одного вида ресурса.

    Наследники перечисляют допустимые ключи подписи, описания, группировки и
    сортировки и возвращают форматтер для каждого из них. При создании
    адаптер проверяет, что любой объявленный ключ действительно умеет
    форматироваться: рассогласование таблиц считается ошибкой разработчика.
    """

    kind: str = ""
    valid_label_keys: Tuple[str, ...] = ()
    default_label_key: str = ""
    valid_description_keys: Tuple[str, ...] = ()
    default_description_keys: Tuple[str, ...] = ()
    valid_group_by_keys: Tuple[str, ...] = ()
    valid_sort_by_keys: Tuple[str, ...] = SORT_BY_KEYS
    default_sort_by_key: str = CREATED_TIME

    def __init__(self) -> None:
        self._formatters: Mapping[str, Formatter] = MappingProxyType(self._build_formatters())
        self._check_tables()

    @abstractmethod
    def _build_formatters(self) -> Dict[str, Formatter]:
        """Возвращает форматтер для каждого ключа вида ресурса."""

    @abstractmethod
    def normalize(self, descriptor: Mapping[str, Any], now: float) -> List[NormalizedItem]:
        """Приводит одно сырое описание к списку нормализованных элементов."""

    @abstractmethod
    def context_value(self, item: NormalizedItem) -> str:
        """Тег узла для внешнего хоста дерева (включение команд)."""

    def format(self, key: str, item: NormalizedItem) -> str:
        """Форматирует поле элемента по ключу."""

        formatter = self._formatters.get(key)
        if formatter is None:
            raise UnknownFormatKeyError(self.kind, key)
        return formatter(item)

    def format_keys(self) -> Tuple[str, ...]:
        return tuple(self._formatters.keys())

    def _check_tables(self) -> None:
        declared = (
            *self.valid_label_keys,
            *self.valid_description_keys,
            *(key for key in self.valid_group_by_keys if key != GROUP_NONE),
        )
        for key in declared:
            if key not in self._formatters:
                raise UnknownFormatKeyError(self.kind, key)
        if self.default_label_key not in self.valid_label_keys:
            raise UnknownFormatKeyError(self.kind, self.default_label_key)
        for key in self.default_description_keys:
            if key not in self.valid_description_keys:
                raise UnknownFormatKeyError(self.kind, key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!r})"


# ------------------------------------------------------------ shared formatters
def _reference(item: NormalizedItem) -> ImageReference:
    return item.image_ref or _MISSING_REFERENCE


def image_reference_formatters() -> Dict[str, Formatter]:
    """Форматтеры полей ссылки на образ, общие для контейнеров и образов.

    ``Repository`` не содержит реестра, а ``FullTag`` и
    ``RepositoryNameAndTag`` совпадают и показывают реестр, только если он
    не ``docker.io/library``, в том числе внутри групп по ``Registry``.
    Расширение VS Code Docker поступало наоборот: реестр входил в
    ``Repository`` и опускался в подписи внутри группы реестра. Здесь
    подпись по умолчанию всегда равна исходной ссылке на образ.
    """

    return {
        "Registry": lambda item: _reference(item).registry,
        "Repository": lambda item: _reference(item).repository,
        "RepositoryName": lambda item: _reference(item).repository_name,
        "Tag": lambda item: _reference(item).tag,
        "FullTag": lambda item: _reference(item).full_tag(),
        "RepositoryNameAndTag": lambda item: _reference(item).full_tag(),
    }


def format_created_time(item: NormalizedItem) -> str:
    return item.created.label


def join_or_placeholder(values: Tuple[Any, ...]) -> str:
    """Склеивает значения через запятую либо возвращает '<none>'."""

    if not values:
        return EMPTY_PLACEHOLDER
    return ",".join(str(value) for value in values)
