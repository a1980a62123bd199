"""Построение иерархического представления ресурсов Docker."""

from __future__ import annotations

from docker_tree.tree.assembler import build_tree
from docker_tree.tree.nodes import GroupNode, LeafNode

__version__ = "1.0.0"

__all__ = ["GroupNode", "LeafNode", "__version__", "build_tree"]
