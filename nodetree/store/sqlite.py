"""Relational tree store on SQLite.

Each row holds only its parent reference; children are queried by
parent_id. attach_seq orders siblings: it is bumped whenever a node is
attached to a parent, on insert or on reparent.
"""

import asyncio
import logging
from datetime import UTC, datetime
from uuid import uuid4

from nodetree.db.connection import Database
from nodetree.errors import InvalidStructureError, NotFoundError
from nodetree.models import Node
from nodetree.store.base import TreeStore

logger = logging.getLogger(__name__)

_NEXT_ATTACH_SEQ = "(SELECT COALESCE(MAX(attach_seq), 0) + 1 FROM nodes)"


class SqliteTreeStore(TreeStore):
    """Store backed by the nodes table of a Database connection.

    All calls share one connection, so every call holds the store lock;
    readers never see a half-applied reparent.
    """

    def __init__(self, db: Database, owns_db: bool = False) -> None:
        self._db = db
        self._owns_db = owns_db
        self._lock = asyncio.Lock()

    @classmethod
    async def open(cls, path: str) -> "SqliteTreeStore":
        """Connect to a SQLite file and return a store that closes it on close()."""
        db = await Database.connect(path)
        logger.info("Opened SQLite tree store at %s", path)
        return cls(db, owns_db=True)

    @property
    def name(self) -> str:
        return "sqlite"

    async def add_node(self, parent_id: str | None = None) -> Node:
        async with self._lock:
            if parent_id is not None and await self._fetch_row(parent_id) is None:
                raise NotFoundError(parent_id)
            node_id = str(uuid4())
            await self._db.execute(
                f"""
                INSERT INTO nodes (node_id, parent_id, attach_seq, created_at)
                VALUES (?, ?, {_NEXT_ATTACH_SEQ}, ?)
                """,
                (node_id, parent_id, datetime.now(UTC).isoformat()),
            )
            return Node(id=node_id, parent=parent_id, children=[])

    async def get_node(self, node_id: str) -> Node:
        async with self._lock:
            return await self._load(node_id)

    async def get_node_count(self) -> int:
        async with self._lock:
            row = await self._db.fetchone("SELECT COUNT(*) AS cnt FROM nodes")
            assert row is not None
            return row["cnt"]

    async def set_parent(self, node_id: str, parent_id: str) -> Node:
        async with self._lock:
            async with self._db.transaction():
                row = await self._fetch_row(node_id)
                if row is None:
                    raise NotFoundError(node_id)
                if row["parent_id"] is None:
                    raise InvalidStructureError(node_id, f"Node is the root: {node_id}")
                if await self._fetch_row(parent_id) is None:
                    raise NotFoundError(parent_id)

                await self._db.execute(
                    f"UPDATE nodes SET parent_id = ?, attach_seq = {_NEXT_ATTACH_SEQ} "
                    "WHERE node_id = ?",
                    (parent_id, node_id),
                )
            return await self._load(node_id)

    async def list_nodes(self) -> list[Node]:
        async with self._lock:
            rows = await self._db.fetchall(
                "SELECT node_id, parent_id FROM nodes ORDER BY attach_seq"
            )
        nodes = {row["node_id"]: Node(id=row["node_id"], parent=row["parent_id"]) for row in rows}
        for row in rows:
            parent = nodes.get(row["parent_id"]) if row["parent_id"] else None
            if parent is not None:
                parent.children.append(row["node_id"])
        return list(nodes.values())

    async def close(self) -> None:
        if self._owns_db:
            await self._db.close()

    async def _fetch_row(self, node_id: str):
        return await self._db.fetchone(
            "SELECT node_id, parent_id FROM nodes WHERE node_id = ?", (node_id,)
        )

    async def _load(self, node_id: str) -> Node:
        row = await self._fetch_row(node_id)
        if row is None:
            raise NotFoundError(node_id)
        child_rows = await self._db.fetchall(
            "SELECT node_id FROM nodes WHERE parent_id = ? ORDER BY attach_seq",
            (node_id,),
        )
        return Node(
            id=row["node_id"],
            parent=row["parent_id"],
            children=[r["node_id"] for r in child_rows],
        )
