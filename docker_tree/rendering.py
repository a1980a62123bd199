"""Вывод дерева узлов в консоль и в JSON."""

from __future__ import annotations

from typing import Any, Dict, Sequence

from rich.markup import escape
from rich.tree import Tree

from docker_tree.tree.nodes import GroupNode, LeafNode, TreeNode


def _leaf_text(node: LeafNode) -> str:
    text = escape(node.label)
    if node.description:
        text += f" [dim]{escape(node.description)}[/dim]"
    return text


def _attach(parent: Tree, node: TreeNode) -> None:
    if isinstance(node, GroupNode):
        branch = parent.add(f"[bold]{escape(node.label)}[/bold]")
        for child in node.children:
            _attach(branch, child)
    else:
        parent.add(_leaf_text(node))


def render_tree(title: str, nodes: Sequence[TreeNode]) -> Tree:
    """Строит rich.Tree для вывода в консоль."""

    root = Tree(f"[bold cyan]{escape(title)}[/bold cyan]")
    for node in nodes:
        _attach(root, node)
    return root


def node_to_dict(node: TreeNode) -> Dict[str, Any]:
    """Сериализует узел в словарь."""

    if isinstance(node, GroupNode):
        return {
            "label": node.label,
            "sortRank": node.sort_rank,
            "children": [node_to_dict(child) for child in node.children],
        }
    return {
        "label": node.label,
        "description": node.description,
        "contextValue": node.context_value,
        "id": node.backing_id,
    }
