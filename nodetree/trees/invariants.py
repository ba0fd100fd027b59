"""Whole-tree structural checks over a snapshot of nodes."""

from nodetree.errors import TreeInvariantError
from nodetree.models import Node


def find_violations(nodes: list[Node]) -> list[str]:
    """Return a description of every invariant violation; empty when valid.

    Checks: exactly one root (for a non-empty tree), parent references
    resolve, parent/children links agree in both directions with no
    duplicate child entries, and every parent chain ends at the root.
    """
    by_id = {node.id: node for node in nodes}
    violations: list[str] = []

    roots = [node.id for node in nodes if node.parent is None]
    if nodes and len(roots) != 1:
        violations.append(f"expected exactly one root, found {len(roots)}: {sorted(roots)}")

    for node in nodes:
        if node.parent is not None:
            parent = by_id.get(node.parent)
            if parent is None:
                violations.append(f"node {node.id} has unknown parent {node.parent}")
            elif node.id not in parent.children:
                violations.append(f"node {node.id} missing from children of {node.parent}")

        if len(set(node.children)) != len(node.children):
            violations.append(f"node {node.id} lists a child more than once")
        for child_id in node.children:
            child = by_id.get(child_id)
            if child is None:
                violations.append(f"node {node.id} lists unknown child {child_id}")
            elif child.parent != node.id:
                violations.append(
                    f"node {node.id} lists child {child_id} whose parent is {child.parent}"
                )

    for node in nodes:
        seen = {node.id}
        current = node
        while current.parent is not None and current.parent in by_id:
            if current.parent in seen:
                violations.append(f"cycle through node {node.id}")
                break
            seen.add(current.parent)
            current = by_id[current.parent]

    return violations


def assert_tree_valid(nodes: list[Node]) -> None:
    """Raise TreeInvariantError listing every violation found."""
    violations = find_violations(nodes)
    if violations:
        raise TreeInvariantError(violations)
