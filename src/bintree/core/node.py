"""
Tree vertex model.

A Node holds an immutable 64-bit signed key and two mutable child slots.
There is no parent link, so traversal only ever goes downwards.

Polarity:
    Insertion places smaller keys on the RIGHT and larger keys on the LEFT,
    the mirror image of the textbook layout. Every traversal in this package
    visits ``right`` before ``left`` to stay consistent with that.
"""

from __future__ import annotations

from typing import Annotated, List, Optional

from pydantic import BaseModel, Field

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

Int64 = Annotated[int, Field(strict=True, ge=INT64_MIN, le=INT64_MAX)]


class Node(BaseModel):
    """
    A single vertex of the tree.

    Nodes compare and hash by identity: two nodes with the same key are
    still different vertices.
    """

    value: Int64 = Field(frozen=True)
    left: Optional[Node] = None
    right: Optional[Node] = None

    def __init__(self, value: int, left: Optional[Node] = None, right: Optional[Node] = None, **data):
        super().__init__(value=value, left=left, right=right, **data)

    def __eq__(self, other: object) -> bool:
        return self is other

    __hash__ = object.__hash__

    def __repr__(self) -> str:
        return f"Node(value={self.value})"

    def get_value(self) -> int:
        return self.value

    def get_left(self) -> Optional[Node]:
        return self.left

    def get_right(self) -> Optional[Node]:
        return self.right

    def set_left(self, node: Optional[Node]) -> None:
        """Overwrite the left child. No validation is performed."""
        self.left = node

    def set_right(self, node: Optional[Node]) -> None:
        """Overwrite the right child. No validation is performed."""
        self.right = node

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def children(self) -> List[Node]:
        """Present children, right first."""
        return [child for child in (self.right, self.left) if child is not None]


Node.model_rebuild()


__all__ = ["Node", "Int64", "INT64_MIN", "INT64_MAX"]
