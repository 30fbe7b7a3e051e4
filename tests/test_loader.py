import logging
import textwrap

import pytest

from bintree.core import Node, new_tree
from bintree.core.file_spec import TreeFileSpec
from bintree.io.loaders import LoaderError, dump_tree, load_tree
from bintree.io.loaders.errors import summarize_errors


def _write(tmp_path, text: str, name: str = "tree.yaml") -> str:
    path = tmp_path / name
    path.write_text(textwrap.dedent(text), encoding="utf-8")
    return str(path)


def test_load_tree_inserts_in_order(tmp_path):
    path = _write(
        tmp_path,
        """
        root: 5
        nodes: [3, 1, 4, 2, 8, 6, 9]
        """,
    )

    tree = load_tree(path)

    assert tree.root.get_value() == 5
    assert tree.root.get_right().get_value() == 3
    assert tree.root.get_left().get_value() == 8
    assert tree.contains(2)
    assert len(tree) == 8


def test_load_tree_root_only(tmp_path):
    path = _write(tmp_path, "root: -7\n")

    tree = load_tree(path)

    assert tree.root.get_value() == -7
    assert tree.root.is_leaf()


def test_load_tree_missing_file(tmp_path):
    with pytest.raises(LoaderError) as exc_info:
        load_tree(str(tmp_path / "missing.yaml"))

    assert "not found" in str(exc_info.value)


def test_load_tree_schema_validation(tmp_path):
    path = _write(
        tmp_path,
        """
        root: five
        nodes: [1, 2]
        extra: true
        """,
    )

    with pytest.raises(LoaderError) as exc_info:
        load_tree(path)

    message = str(exc_info.value)
    assert "Invalid tree definition" in message
    assert "root" in message
    assert "extra" in message


def test_load_tree_requires_mapping(tmp_path):
    path = _write(tmp_path, "- 1\n- 2\n")

    with pytest.raises(LoaderError):
        load_tree(path)


def test_load_tree_malformed_yaml(tmp_path):
    path = _write(tmp_path, "root: [5\n")

    with pytest.raises(LoaderError) as exc_info:
        load_tree(path)

    assert "Malformed YAML" in str(exc_info.value)


def test_load_tree_duplicate_key(tmp_path):
    path = _write(
        tmp_path,
        """
        root: 5
        nodes: [3, 5]
        """,
    )

    with pytest.raises(LoaderError) as exc_info:
        load_tree(path)

    assert "Failed to build tree" in str(exc_info.value)
    assert "Duplicate key: 5" in str(exc_info.value)


def test_validation_summary_is_truncated():
    spec_errors = [{"loc": ("nodes", i), "msg": "bad"} for i in range(5)]
    summary = summarize_errors(spec_errors)

    assert summary.count("nodes.") == 3
    assert summary.endswith("... (2 more)")


def test_dump_tree_rebuilds_same_shape(tmp_path):
    original = new_tree(Node(5), *(Node(v) for v in [3, 1, 4, 2, 8, 6, 9]))
    path = str(tmp_path / "out" / "tree.yaml")

    dump_tree(original, path)
    reloaded = load_tree(path)

    assert reloaded.values() == original.values()
    assert [n.value for n in reloaded.flatten(3)] == [n.value for n in original.flatten(3)]


def test_file_spec_from_empty_tree_rejected():
    from bintree.core import Tree

    with pytest.raises(ValueError):
        TreeFileSpec.from_tree(Tree())


def test_duplicate_key_logs_without_traceback(tmp_path, caplog):
    path = _write(
        tmp_path,
        """
        root: 5
        nodes: [3, 5]
        """,
    )
    caplog.set_level(logging.DEBUG)

    with pytest.raises(LoaderError):
        load_tree(path)

    assert not [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert not [r for r in caplog.records if r.exc_info]
