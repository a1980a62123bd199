"""Узлы итогового дерева, передаваемые внешнему хосту отображения."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True, slots=True)
class LeafNode:
    """Узел одного ресурса."""

    label: str
    description: str
    context_value: str  # тег для включения команд в хосте дерева
    backing_id: str


@dataclass(frozen=True, slots=True)
class GroupNode:
    """Узел группы с упорядоченными дочерними узлами."""

    label: str
    sort_rank: int
    children: Tuple["TreeNode", ...] = ()


TreeNode = Union[GroupNode, LeafNode]
