"""
Shared fixtures for tree tests.
"""

from typing import Dict, Tuple

import pytest

from bintree.core import Node, Tree, new_tree

REFERENCE_ORDER = [5, 3, 1, 4, 2, 8, 6, 9]


def make_reference_tree() -> Tuple[Tree, Dict[int, Node]]:
    """
    Build the reference tree and return it with its nodes keyed by value.

             5          level 0
           /   \\
          8     3       level 1
         / \\   / \\
        9   6 4   1     level 2
                 /
                2       level 3
    """
    nodes = {value: Node(value) for value in REFERENCE_ORDER}
    tree = new_tree(nodes[5], *(nodes[value] for value in REFERENCE_ORDER[1:]))
    return tree, nodes


@pytest.fixture
def reference_tree() -> Tuple[Tree, Dict[int, Node]]:
    return make_reference_tree()
