from __future__ import annotations

"""
Unit tests for the Layout Domain Models.

Verifies node linking, traversal helpers and the bare-item heuristic.
"""

import pytest

from scaffold4ai.domain.layout_models import (
    LayoutNode,
    count_nodes,
    find_node,
    is_last_child,
    iter_nodes,
    looks_like_bare_item,
)


def test_add_child_sets_back_reference():
    root = LayoutNode(id=1, name="root", is_dir=True)
    child = LayoutNode(id=2, name="a.py", is_dir=False, depth=1)

    root.add_child(child)

    assert root.children == [child]
    assert child.parent is root


def test_display_name_marks_directories():
    assert LayoutNode(id=1, name="src", is_dir=True).display_name == "src/"
    assert LayoutNode(id=2, name="a.py", is_dir=False).display_name == "a.py"


def test_repr_omits_parent_cycle(simple_tree):
    text = repr(simple_tree)
    assert "parent" not in text
    assert "main.ext" in text


def test_iter_nodes_preorder(nested_tree):
    names = [n.name for n in iter_nodes(nested_tree)]
    assert names == [
        "my-project", "src", "main.go", "utils", "helpers.go",
        "tests", "main_test.go", ".gitignore", "README.md",
    ]


def test_helpers_accept_empty_tree():
    assert list(iter_nodes(None)) == []
    assert count_nodes(None) == 0
    assert find_node(None, 1) is None


def test_find_node(simple_tree):
    assert find_node(simple_tree, 3).name == "main.ext"
    assert find_node(simple_tree, 42) is None


def test_is_last_child(simple_tree):
    src, readme = simple_tree.children
    assert is_last_child(simple_tree) is True
    assert is_last_child(src) is False
    assert is_last_child(readme) is True


@pytest.mark.parametrize("token, expected", [
    ("app/", True),
    ("main.py", True),
    (".env", True),
    ("...", False),
    ("etc.", False),
    ("e.g.", False),
    ("/", False),
    (".../", False),
    ("Makefile", False),
    ("my app/", False),
    ("", False),
])
def test_looks_like_bare_item(token, expected):
    assert looks_like_bare_item(token) is expected
