"""
bintree CLI: build a tree from keys or a YAML file, then inspect or query it.

Keys are inserted in the order given; the first one is the root. Negative
keys must follow ``--`` so they are not read as options.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import typer
from rich.console import Console

from bintree.cli.formatters import build_levels_table, build_rich_tree, format_values
from bintree.cli.load_helpers import tree_or_exit
from bintree.io.loaders import dump_tree

app = typer.Typer(help="bintree CLI: build, show and query inverted-polarity binary search trees.")
console = Console()

KEYS_HELP = "Keys to insert, root first"
FILE_HELP = "Path to a YAML tree definition"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def show(
    keys: Optional[List[int]] = typer.Argument(None, help=KEYS_HELP),
    file: Optional[str] = typer.Option(None, "--file", "-f", help=FILE_HELP),
    save: Optional[str] = typer.Option(None, "--save", help="Write the tree definition to this YAML file"),
) -> None:
    """Render the tree (R: smaller keys, L: larger keys)."""
    tree = tree_or_exit(keys, file, console=console)

    console.print(build_rich_tree(tree))
    console.print(f"Size: {len(tree)}, Height: {tree.height()}")

    if save:
        dump_tree(tree, save)
        console.print(f"[green]Saved[/green] {save}")


@app.command()
def contains(
    value: int = typer.Argument(..., help="Value to look up"),
    keys: Optional[List[int]] = typer.Argument(None, help=KEYS_HELP),
    file: Optional[str] = typer.Option(None, "--file", "-f", help=FILE_HELP),
) -> None:
    """Check membership; exits with 1 when the value is absent."""
    tree = tree_or_exit(keys, file, console=console)

    if tree.contains(value):
        console.print(f"[green]Found[/green] {value}")
        return
    console.print(f"[yellow]Not found[/yellow] {value}")
    raise typer.Exit(code=1)


@app.command()
def flatten(
    keys: Optional[List[int]] = typer.Argument(None, help=KEYS_HELP),
    file: Optional[str] = typer.Option(None, "--file", "-f", help=FILE_HELP),
    depth: Optional[int] = typer.Option(None, "--depth", "-d", min=0, help="Levels below the root (default: whole tree)"),
) -> None:
    """Print values grouped by subtree, right child first."""
    tree = tree_or_exit(keys, file, console=console)

    if depth is None:
        depth = max(tree.height() - 1, 0)
    console.print(format_values(tree.flatten(depth)))


@app.command()
def levels(
    keys: Optional[List[int]] = typer.Argument(None, help=KEYS_HELP),
    file: Optional[str] = typer.Option(None, "--file", "-f", help=FILE_HELP),
) -> None:
    """Show the values found at each depth, in search order."""
    tree = tree_or_exit(keys, file, console=console)
    console.print(build_levels_table(tree))


if __name__ == "__main__":  # pragma: no cover
    app()
