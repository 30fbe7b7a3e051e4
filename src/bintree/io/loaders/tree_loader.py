from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from bintree.core.errors import ConstructionError
from bintree.core.file_spec import TreeFileSpec
from bintree.core.tree import Tree
from bintree.io.loaders.errors import LoaderError
from bintree.utils.logging import log_calls

logger = logging.getLogger(__name__)


def _read_yaml_file(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@log_calls(expected=(LoaderError,))
def load_tree(path: str) -> Tree:
    """Load a tree definition from a YAML file.

    Expected format:
    root: 5
    nodes: [3, 1, 4, 2, 8, 6, 9]

    Nodes are inserted in the listed order.
    """
    if not os.path.isfile(path):
        raise LoaderError(path, "Tree definition not found")
    try:
        data = _read_yaml_file(path)
    except yaml.YAMLError as exc:
        raise LoaderError(path, "Malformed YAML", cause=exc) from exc
    if not isinstance(data, dict):
        raise LoaderError(path, "Tree definition must be a mapping")

    try:
        spec = TreeFileSpec.model_validate(data)
    except ValidationError as exc:
        raise LoaderError(path, "Invalid tree definition", cause=exc) from exc
    try:
        tree = spec.build()
    except ConstructionError as exc:
        raise LoaderError(path, "Failed to build tree", cause=exc) from exc

    logger.info("Loaded tree with %d node(s) from %s", len(tree), path)
    return tree


def dump_tree(tree: Tree, file_path: str) -> None:
    """Save ``tree`` as a YAML definition that ``load_tree`` rebuilds identically."""
    Path(file_path).parent.mkdir(parents=True, exist_ok=True)
    data = TreeFileSpec.from_tree(tree).model_dump()
    with open(file_path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=None, sort_keys=False)
    logger.info("Saved tree with %d node(s) to %s", len(tree), file_path)
