"""Упорядочивание элементов и групп."""

from __future__ import annotations

from typing import List, Protocol, Sequence, TypeVar

from docker_tree.adapters.base import CREATED_TIME, LABEL, ResourceAdapter
from docker_tree.descriptors.models import NormalizedItem
from docker_tree.exceptions import UnknownFormatKeyError


class RankedGroup(Protocol):
    """Группа с подписью и рангом корзины."""

    @property
    def label(self) -> str: ...

    @property
    def sort_rank(self) -> int: ...


G = TypeVar("G", bound=RankedGroup)


def sort_items(
    items: Sequence[NormalizedItem],
    sort_by: str,
    adapter: ResourceAdapter,
    label_key: str,
) -> List[NormalizedItem]:
    """Сортирует элементы устойчиво (равные сохраняют входной порядок).

    ``CreatedTime`` сортирует от новых к старым, ``Label`` по возрастанию
    кодовых точек текста подписи с учётом регистра.
    """

    if sort_by == CREATED_TIME:
        return sorted(items, key=lambda item: -item.created_at)
    if sort_by == LABEL:
        return sorted(items, key=lambda item: adapter.format(label_key, item))
    raise UnknownFormatKeyError(adapter.kind, sort_by)


def sort_groups(groups: Sequence[G], *, by_rank: bool) -> List[G]:
    """Упорядочивает группы по рангу корзины либо по тексту подписи."""

    if by_rank:
        return sorted(groups, key=lambda group: (group.sort_rank, group.label))
    return sorted(groups, key=lambda group: group.label)
