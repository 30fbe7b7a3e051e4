"""
Tree aggregate: insertion, construction and membership.

Insertion descends iteratively from the root:
- smaller key than the current node -> go RIGHT
- larger key than the current node  -> go LEFT
- equal key                         -> DuplicateKeyError, nothing attached

Construction via ``new_tree`` is all-or-nothing: if any insertion fails,
every link made during construction is undone before ConstructionError is
raised.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, PrivateAttr

from bintree.core.errors import ConstructionError, DuplicateKeyError, TreeError
from bintree.core.node import Node
from bintree.core.search import bf_flatten, bf_search, iter_levels
from bintree.utils.logging import log_calls

logger = logging.getLogger(__name__)

# (parent, side) of an attachment; parent is None when the node became root
Attachment = Tuple[Optional[Node], Optional[str]]


def _count(node: Optional[Node]) -> int:
    """Nodes reachable from ``node``, itself included."""
    return sum(len(level) for level in iter_levels(node))


class Tree(BaseModel):
    """
    A binary search tree rooted at ``root``.

    The tree owns the graph reachable from the root. Nodes may still be held
    by callers for inspection, but links should only change through ``add``.
    """

    root: Optional[Node] = None

    _size: int = PrivateAttr(default=0)

    def model_post_init(self, context: Any) -> None:
        self._size = _count(self.root)

    @classmethod
    def build(cls, root: Node, *nodes: Node) -> Tree:
        return new_tree(root, *nodes)

    # =========================================================================
    # Insertion
    # =========================================================================

    def add(self, node: Node) -> None:
        """
        Insert ``node`` into the tree.

        Only ``node`` itself is placed by key; children already linked to it
        come along unchanged and are included in ``len(tree)``.

        Raises:
            DuplicateKeyError: If a node with the same key is already present
                (including ``node`` itself).
            TypeError: If ``node`` is not a Node.
        """
        self._attach(node)

    def _attach(self, node: Node) -> Attachment:
        if not isinstance(node, Node):
            raise TypeError(f"Expected Node, got {type(node).__name__}")

        if self.root is None:
            self.root = node
            self._size += _count(node)
            logger.debug("Set root: %s", node.value)
            return None, None

        current = self.root
        while True:
            if node.value < current.value:
                if current.right is None:
                    current.set_right(node)
                    side = "right"
                    break
                current = current.right
            elif node.value > current.value:
                if current.left is None:
                    current.set_left(node)
                    side = "left"
                    break
                current = current.left
            else:
                raise DuplicateKeyError(node.value)

        self._size += _count(node)
        logger.debug("Attached %s as %s child of %s", node.value, side, current.value)
        return current, side

    def _detach(self, attachment: Attachment) -> None:
        parent, side = attachment
        if parent is None:
            detached, self.root = self.root, None
        elif side == "right":
            detached = parent.get_right()
            parent.set_right(None)
        else:
            detached = parent.get_left()
            parent.set_left(None)
        self._size -= _count(detached)

    # =========================================================================
    # Queries
    # =========================================================================

    def search(self, value: int) -> Optional[Node]:
        return bf_search(self.root, value)

    def contains(self, value: int) -> bool:
        return bf_search(self.root, value) is not None

    def __contains__(self, value: object) -> bool:
        # bool is an int subclass but never a valid key
        return isinstance(value, int) and not isinstance(value, bool) and self.contains(value)

    def __len__(self) -> int:
        return self._size

    @property
    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self.root is None

    def height(self) -> int:
        """Number of levels; 0 for an empty tree."""
        return sum(1 for _ in iter_levels(self.root))

    def levels(self) -> List[List[Node]]:
        return list(iter_levels(self.root))

    def nodes(self) -> List[Node]:
        """All nodes in level order (right before left within a level)."""
        return [node for level in iter_levels(self.root) for node in level]

    def values(self) -> List[int]:
        return [node.value for node in self.nodes()]

    def flatten(self, depth: int) -> List[Node]:
        return bf_flatten(self.root, depth)


@log_calls(expected=(ConstructionError, TypeError))
def new_tree(root: Node, *nodes: Node) -> Tree:
    """
    Create a tree rooted at ``root`` and insert ``nodes`` in order.

    Raises:
        TypeError: If ``root`` is not a Node.
        ConstructionError: If any insertion fails. Links made by this call
            are rolled back first, so no node is left half-attached.
    """
    if not isinstance(root, Node):
        raise TypeError(f"Tree root must be a Node, got {type(root).__name__}")

    tree = Tree(root=root)
    attached: List[Attachment] = []
    for index, node in enumerate(nodes):
        try:
            attached.append(tree._attach(node))
        except (TreeError, TypeError) as exc:
            for attachment in reversed(attached):
                tree._detach(attachment)
            logger.debug("Rolled back %d insertion(s) after failure at #%d", len(attached), index)
            raise ConstructionError(index, exc) from exc

    return tree


__all__ = ["Tree", "new_tree"]
