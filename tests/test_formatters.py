from bintree.cli.formatters import build_levels_table, build_rich_tree
from bintree.core import Node, Tree, new_tree


def _labels(rendered):
    """Walk a rich tree without recursion, returning labels in visit order."""
    labels = []
    pending = [rendered]
    while pending:
        branch = pending.pop()
        labels.append(str(branch.label))
        pending.extend(reversed(branch.children))
    return labels


def test_rich_tree_lists_right_before_left(reference_tree):
    tree, _ = reference_tree
    rendered = build_rich_tree(tree)

    assert [str(child.label) for child in rendered.children] == ["R: 3", "L: 8"]
    assert _labels(rendered) == [
        "[bold]5[/bold]",
        "R: 3", "R: 1", "L: 2", "L: 4",
        "L: 8", "R: 6", "L: 9",
    ]


def test_rich_tree_long_chain():
    keys = list(range(2000, 0, -1))
    tree = new_tree(Node(keys[0]), *(Node(key) for key in keys[1:]))

    labels = _labels(build_rich_tree(tree))

    assert len(labels) == 2000
    assert labels[-1] == "R: 1"


def test_empty_tree_renders_placeholder():
    assert "empty" in str(build_rich_tree(Tree()).label)


def test_levels_table_has_row_per_depth(reference_tree):
    tree, _ = reference_tree
    assert build_levels_table(tree).row_count == 4
