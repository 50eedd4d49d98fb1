# src/tabledrag_tree/core/visualizer.py
from typing import Iterable

from tabledrag_tree.core.tree_builder import TreeEntry


def render_tree(entries: Iterable[TreeEntry], indent_unit: str = "    ") -> str:
    """Returns the built tree as text, one item per line, indented by depth."""
    lines = []
    for item, depth in entries:
        lines.append(f"{indent_unit * depth}{item.name} (id={item.id}, weight={item.weight})")
    return "\n".join(lines)
