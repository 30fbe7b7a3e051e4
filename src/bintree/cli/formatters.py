"""Formatting helpers for CLI presentation."""

from __future__ import annotations

from typing import List

from rich.table import Table
from rich.tree import Tree as RichTree

from bintree.core.node import Node
from bintree.core.tree import Tree


def _attach_children(branch: RichTree, node: Node) -> None:
    pending = [(branch, node)]
    while pending:
        branch, node = pending.pop()
        for label, child in (("R", node.right), ("L", node.left)):
            if child is not None:
                pending.append((branch.add(f"{label}: {child.value}"), child))


def build_rich_tree(tree: Tree) -> RichTree:
    """Render the tree with right children listed before left ones."""
    if tree.root is None:
        return RichTree("[dim](empty)[/dim]")
    rendered = RichTree(f"[bold]{tree.root.value}[/bold]")
    _attach_children(rendered, tree.root)
    return rendered


def build_levels_table(tree: Tree) -> Table:
    table = Table(title="Levels")
    table.add_column("Depth", justify="right")
    table.add_column("Values")
    for depth, level in enumerate(tree.levels()):
        table.add_row(str(depth), format_values(level))
    return table


def format_values(nodes: List[Node]) -> str:
    return " ".join(str(node.value) for node in nodes)


__all__ = ["build_rich_tree", "build_levels_table", "format_values"]
