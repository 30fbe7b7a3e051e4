"""
Level-synchronized traversal over a node graph.

All functions take a root node (or None) rather than a Tree so they can be
used on any subtree. Within a level, each parent contributes its right
child before its left child, and parents keep the previous level's order.

Example, for the tree built from 5 then 3, 1, 4, 2, 8, 6, 9:

         5          level 0
       /   \\
      8     3       level 1   (scanned as 3, 8)
     / \\   / \\
    9   6 4   1     level 2   (scanned as 1, 4, 6, 9)
             /
            2       level 3
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from bintree.core.node import Node


def iter_levels(root: Optional[Node]) -> Iterator[List[Node]]:
    """
    Yield the nodes of each depth, starting with ``[root]``.

    A node reached twice (only possible on a malformed, prelinked graph) is
    yielded once, so iteration always ends.
    """
    if root is None:
        return
    seen = {root}
    level = [root]
    while level:
        yield level
        next_level: List[Node] = []
        for node in level:
            for child in node.children():
                if child in seen:
                    continue
                seen.add(child)
                next_level.append(child)
        level = next_level


def bf_search(root: Optional[Node], target: int) -> Optional[Node]:
    """
    Find the node holding ``target`` by scanning depth after depth.

    Returns:
        The matching node, or None when the graph is exhausted.
    """
    if root is None:
        return None
    if root.value == target:
        return root

    for depth, level in enumerate(iter_levels(root)):
        if depth == 0:
            continue
        for node in level:
            if node.value == target:
                return node
    return None


def bf_flatten(root: Optional[Node], depth: int) -> List[Node]:
    """
    Flatten the tree grouped by subtree, down to ``depth`` levels below root.

    The root comes first, then its children (right, left); after that each
    child contributes its own children followed by the deeper levels of its
    subtree, right child first. For the tree in the module docstring and a
    depth of 3 the result is 5, 3, 8, 1, 4, 2, 6, 9.
    """
    if depth < 0:
        raise ValueError(f"depth must be >= 0, got {depth}")
    if root is None:
        return []

    flattened = [root]
    # (node, remaining depth); the first child is pushed last so its whole
    # subtree is emitted before its sibling's
    stack = [(root, depth)]
    while stack:
        node, remaining = stack.pop()
        if remaining == 0:
            continue
        children = node.children()
        flattened.extend(children)
        stack.extend((child, remaining - 1) for child in reversed(children))
    return flattened


__all__ = ["iter_levels", "bf_search", "bf_flatten"]
