from __future__ import annotations

"""Shared helpers for building trees with CLI-friendly errors."""

from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from bintree.core.errors import ConstructionError
from bintree.core.node import Node
from bintree.core.tree import Tree, new_tree
from bintree.io.loaders import LoaderError, load_tree


def tree_or_exit(
    keys: Optional[List[int]],
    file: Optional[str],
    *,
    console: Console,
) -> Tree:
    """Build a tree from a YAML file or inline keys (first key is the root)."""
    if file is not None:
        if keys:
            console.print("[red]Pass either keys or --file, not both[/red]")
            raise typer.Exit(code=2)
        if not Path(file).exists():
            console.print(f"[red]Path not found:[/red] {file}")
            raise typer.Exit(code=1)
        try:
            return load_tree(file)
        except LoaderError as err:
            console.print(f"[red]Failed to load tree:[/red] {err}")
            raise typer.Exit(code=1)

    if not keys:
        console.print("[red]No keys given[/red] (pass keys or --file)")
        raise typer.Exit(code=2)
    try:
        return new_tree(Node(keys[0]), *(Node(key) for key in keys[1:]))
    except ValidationError as err:
        console.print(f"[red]Invalid key:[/red] {err.errors()[0]['msg']}")
        raise typer.Exit(code=2)
    except ConstructionError as err:
        console.print(f"[red]Failed to build tree:[/red] {err}")
        raise typer.Exit(code=1)


__all__ = ["tree_or_exit"]
