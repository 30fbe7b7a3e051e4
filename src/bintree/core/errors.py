from __future__ import annotations

"""Exceptions raised by tree insertion and construction."""


class TreeError(Exception):
    """Base class for tree failures."""


class DuplicateKeyError(TreeError, ValueError):
    """An inserted node carries a key that is already in the tree."""

    def __init__(self, key: int):
        self.key = key
        super().__init__(f"Duplicate key: {key}")


class ConstructionError(TreeError):
    """Building a tree failed; wraps the first insertion failure."""

    def __init__(self, index: int, cause: Exception):
        self.index = index
        self.cause = cause
        super().__init__(f"Failed to insert node #{index}: {cause}")


__all__ = ["TreeError", "DuplicateKeyError", "ConstructionError"]
