"""Tests for the whole-tree invariant checker."""

import pytest

from nodetree.errors import TreeInvariantError
from nodetree.models import Node
from nodetree.trees.invariants import assert_tree_valid, find_violations


def _valid_tree() -> list[Node]:
    return [
        Node(id="r", parent=None, children=["a", "b"]),
        Node(id="a", parent="r", children=["c"]),
        Node(id="b", parent="r"),
        Node(id="c", parent="a"),
    ]


class TestFindViolations:
    def test_valid_tree(self):
        assert find_violations(_valid_tree()) == []

    def test_empty_tree_is_valid(self):
        assert find_violations([]) == []

    def test_two_roots(self):
        nodes = _valid_tree() + [Node(id="x")]
        violations = find_violations(nodes)
        assert any("exactly one root" in v for v in violations)

    def test_no_root(self):
        nodes = [
            Node(id="a", parent="b", children=["b"]),
            Node(id="b", parent="a", children=["a"]),
        ]
        violations = find_violations(nodes)
        assert any("found 0" in v for v in violations)
        assert any("cycle" in v for v in violations)

    def test_unknown_parent(self):
        nodes = _valid_tree() + [Node(id="x", parent="ghost")]
        assert any("unknown parent ghost" in v for v in find_violations(nodes))

    def test_child_missing_from_parent_list(self):
        nodes = _valid_tree()
        nodes[0] = Node(id="r", parent=None, children=["a"])
        assert find_violations(nodes) == ["node b missing from children of r"]

    def test_child_listed_under_wrong_parent(self):
        nodes = _valid_tree()
        nodes[2] = Node(id="b", parent="r", children=["c"])
        assert "node b lists child c whose parent is a" in find_violations(nodes)

    def test_duplicate_child_entry(self):
        nodes = _valid_tree()
        nodes[1] = Node(id="a", parent="r", children=["c", "c"])
        assert "node a lists a child more than once" in find_violations(nodes)

    def test_unknown_child(self):
        nodes = _valid_tree()
        nodes[2] = Node(id="b", parent="r", children=["ghost"])
        assert "node b lists unknown child ghost" in find_violations(nodes)


class TestAssertTreeValid:
    def test_passes_for_valid_tree(self):
        assert_tree_valid(_valid_tree())

    def test_raises_with_all_violations(self):
        nodes = _valid_tree() + [Node(id="x"), Node(id="y", parent="ghost")]
        with pytest.raises(TreeInvariantError) as exc_info:
            assert_tree_valid(nodes)
        assert len(exc_info.value.violations) == 2
