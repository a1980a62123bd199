"""Разбиение элементов на группы одного уровня."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, List, Sequence

from docker_tree.adapters.base import CREATED_TIME, ResourceAdapter
from docker_tree.descriptors.models import NormalizedItem
from docker_tree.tree.sorting import sort_groups, sort_items


@dataclass(slots=True)
class ItemGroup:
    """Группа нормализованных элементов с общей подписью."""

    label: str
    sort_rank: int = 0
    items: List[NormalizedItem] = field(default_factory=list)


def group_items(
    items: Sequence[NormalizedItem],
    group_by: str,
    sort_by: str,
    adapter: ResourceAdapter,
    label_key: str,
) -> List[ItemGroup]:
    """Группирует элементы и сортирует группы и их содержимое.

    Для ``CreatedTime`` группы идут от самой свежей корзины к самой старой
    по рангу, для остальных ключей по возрастанию подписи группы. Внутри
    группы применяется тот же порядок, что и для плоского списка. У групп
    по времени ``sort_rank`` равен рангу корзины, у остальных позиции.
    """

    by_time = group_by == CREATED_TIME
    buckets: Dict[str, ItemGroup] = {}
    for item in items:
        label = adapter.format(group_by, item)
        bucket = buckets.get(label)
        if bucket is None:
            bucket = buckets[label] = ItemGroup(
                label=label, sort_rank=item.created.rank if by_time else 0
            )
        bucket.items.append(item)

    ordered = sort_groups(list(buckets.values()), by_rank=by_time)
    result = []
    for position, group in enumerate(ordered):
        result.append(
            replace(
                group,
                sort_rank=group.sort_rank if by_time else position,
                items=sort_items(group.items, sort_by, adapter, label_key),
            )
        )
    return result
