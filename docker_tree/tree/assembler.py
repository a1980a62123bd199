"""Сборка дерева узлов из сырых описаний и настроек."""

from __future__ import annotations

import logging
import time
from typing import Any, Iterable, Optional, Tuple

from docker_tree.adapters.base import ResourceAdapter
from docker_tree.adapters.registry import ResourceKind, get_adapter
from docker_tree.descriptors.models import NormalizedItem
from docker_tree.descriptors.normalizer import normalize_all
from docker_tree.settings.tree_settings import TreeSettings, validate_settings
from docker_tree.tree.grouping import group_items
from docker_tree.tree.nodes import GroupNode, LeafNode, TreeNode
from docker_tree.tree.sorting import sort_items

LOGGER = logging.getLogger(__name__)

DESCRIPTION_SEPARATOR = " - "


def build_leaf(
    item: NormalizedItem, settings: TreeSettings, adapter: ResourceAdapter
) -> LeafNode:
    """Формирует узел ресурса по настройкам подписи и описания."""

    description = DESCRIPTION_SEPARATOR.join(
        adapter.format(key, item) for key in settings.description_keys
    )
    return LeafNode(
        label=adapter.format(settings.label_key, item),
        description=description,
        context_value=adapter.context_value(item),
        backing_id=item.id,
    )


def build_tree(
    kind: "ResourceKind | str",
    descriptors: Iterable[Any],
    settings: Any = None,
    *,
    now: Optional[float] = None,
) -> Tuple[TreeNode, ...]:
    """Строит упорядоченное дерево узлов для одного вида ресурсов.

    Функция чистая: входные описания не изменяются, ничего не кешируется
    между вызовами. Некорректные настройки и поля описаний заменяются
    значениями по умолчанию. Исключение возможно только при ошибке
    разработчика (неизвестный вид ресурса или рассогласованный адаптер).
    """

    adapter = get_adapter(kind)
    current_time = time.time() if now is None else now

    items = normalize_all(descriptors, adapter.normalize, current_time)
    tree_settings = validate_settings(settings, adapter)
    LOGGER.debug(
        "Building %s tree: %d items, settings=%s", adapter.kind, len(items), tree_settings
    )

    if tree_settings.group_by_key is None:
        ordered = sort_items(items, tree_settings.sort_by_key, adapter, tree_settings.label_key)
        return tuple(build_leaf(item, tree_settings, adapter) for item in ordered)

    groups = group_items(
        items,
        tree_settings.group_by_key,
        tree_settings.sort_by_key,
        adapter,
        tree_settings.label_key,
    )
    return tuple(
        GroupNode(
            label=group.label,
            sort_rank=group.sort_rank,
            children=tuple(build_leaf(item, tree_settings, adapter) for item in group.items),
        )
        for group in groups
    )
