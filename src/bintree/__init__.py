"""
bintree: a binary search tree over int64 keys.

Smaller keys descend to the right and larger keys to the left; membership
is answered by a level-synchronized breadth-first search.

Example:
    from bintree import Node, new_tree

    tree = new_tree(Node(5), Node(3), Node(8))
    assert tree.root.get_right().get_value() == 3
    assert tree.contains(8)
"""

from bintree.core import (
    ConstructionError,
    DuplicateKeyError,
    Node,
    Tree,
    TreeError,
    bf_flatten,
    bf_search,
    iter_levels,
    new_tree,
)

__all__ = [
    "Node",
    "Tree",
    "new_tree",
    "bf_search",
    "bf_flatten",
    "iter_levels",
    "TreeError",
    "DuplicateKeyError",
    "ConstructionError",
]
