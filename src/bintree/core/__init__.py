"""
Core tree data structures.

Components:
- Node: a vertex with an immutable int64 key and right/left child slots
- Tree: root holder with insertion and membership queries
- bf_search / bf_flatten / iter_levels: traversals over a root node
"""

from bintree.core.errors import ConstructionError, DuplicateKeyError, TreeError
from bintree.core.node import Node
from bintree.core.search import bf_flatten, bf_search, iter_levels
from bintree.core.tree import Tree, new_tree

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
