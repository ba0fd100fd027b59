"""
Offline consistency check of a SQLite tree file.

Loads every node, then verifies the tree invariants: one root, parent
references resolve, parent/children links agree, no cycles. Prints each
violation and exits 1 when any are found.

Usage:
    python scripts/check_tree.py [path/to/nodetree.db]
"""

import asyncio
import sys
from pathlib import Path

from nodetree.store.sqlite import SqliteTreeStore
from nodetree.trees.invariants import find_violations


def get_db_path() -> Path:
    """Resolve the database path from argv, defaulting to the repo root."""
    if len(sys.argv) > 1:
        return Path(sys.argv[1])
    return Path(__file__).resolve().parent.parent / "nodetree.db"


async def check(db_path: Path) -> list[str]:
    store = await SqliteTreeStore.open(str(db_path))
    try:
        nodes = await store.list_nodes()
    finally:
        await store.close()
    print(f"Loaded {len(nodes)} nodes from {db_path}")
    return find_violations(nodes)


if __name__ == "__main__":
    path = get_db_path()
    if not path.exists():
        print(f"Database not found: {path}")
        sys.exit(1)

    violations = asyncio.run(check(path))
    for violation in violations:
        print(f"  VIOLATION: {violation}")
    if violations:
        sys.exit(1)
    print("Tree is consistent.")
