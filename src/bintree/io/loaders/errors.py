from __future__ import annotations

"""Errors raised while reading tree definition files."""

import os
from typing import Any, Iterable, Mapping

from pydantic import ValidationError

MAX_DETAILS = 3


def summarize_errors(errors: Iterable[Mapping[str, Any]], limit: int = MAX_DETAILS) -> str:
    """Collapse pydantic error dicts into ``loc: msg`` snippets, keeping the first ``limit``."""
    errors = list(errors)
    shown = [
        "{}: {}".format(
            ".".join(map(str, err.get("loc", ()))) or "<root>",
            err.get("msg") or err.get("type") or "validation error",
        )
        for err in errors[:limit]
    ]
    hidden = len(errors) - len(shown)
    if hidden > 0:
        shown.append(f"... ({hidden} more)")
    return "; ".join(shown)


def _display_path(path: str) -> str:
    try:
        return os.path.relpath(path)
    except ValueError:  # pragma: no cover - different drive on Windows
        return path


class LoaderError(RuntimeError):
    """A tree definition file could not be turned into a Tree."""

    def __init__(self, file_path: str, message: str, *, cause: Exception | None = None):
        self.file_path = file_path
        self.message = message
        self.cause = cause
        super().__init__(self.describe())

    def describe(self) -> str:
        text = f"{self.message} ({_display_path(self.file_path)})"
        if self.cause is None:
            return text
        if isinstance(self.cause, ValidationError):
            return f"{text}: {summarize_errors(self.cause.errors())}"
        return f"{text}: {self.cause}"


__all__ = ["LoaderError", "summarize_errors"]
