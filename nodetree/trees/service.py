"""Tree service: enforces single-root and acyclicity on top of a TreeStore.

Depth and root are never stored; they are derived by walking parent links
(for a single node) or from the BFS level (for descendants).
"""

import asyncio
import logging
from collections import deque

from nodetree.errors import DuplicateRootError, InvalidArgumentError, InvalidStructureError
from nodetree.models import Node, NodeInfo
from nodetree.store.base import TreeStore

logger = logging.getLogger(__name__)


class TreeService:
    """Tree operations over one logical tree.

    Every public operation holds the tree lock, so a check and the write it
    guards (root uniqueness before create, cycle check before reparent) are
    never interleaved with another mutation from this process.
    """

    def __init__(self, store: TreeStore) -> None:
        self._store = store
        self._lock = asyncio.Lock()

    async def add_node(self, parent_id: str | None = None) -> NodeInfo:
        """Create a node under parent_id, or the root when parent_id is None.

        Raises DuplicateRootError if a root is requested on a non-empty tree
        and NotFoundError if parent_id does not resolve.
        """
        async with self._lock:
            if parent_id is None and await self._store.get_node_count() > 0:
                logger.warning("Rejected root creation: tree already has a root")
                raise DuplicateRootError()

            node = await self._store.add_node(parent_id)
            info = await self._node_info(node)
        logger.info("Created node %s (parent=%s, depth=%d)", info.id, info.parent, info.depth)
        return info

    async def get_node(self, node_id: str) -> NodeInfo:
        """NodeInfo for a single node. Raises NotFoundError."""
        async with self._lock:
            node = await self._store.get_node(node_id)
            return await self._node_info(node)

    async def get_descendants(self, node_id: str) -> list[NodeInfo]:
        """All nodes below node_id in breadth-first order, excluding node_id.

        Children precede grandchildren; siblings keep attachment order.
        Raises NotFoundError if node_id does not resolve.
        """
        async with self._lock:
            return await self._collect_descendants(node_id)

    async def set_parent(self, node_id: str, parent_id: str) -> NodeInfo:
        """Move node_id (and its subtree) under parent_id.

        Raises InvalidArgumentError when node_id == parent_id,
        InvalidStructureError when parent_id is a descendant of node_id or
        node_id is the root, and NotFoundError when either id is unknown.
        """
        if node_id == parent_id:
            raise InvalidArgumentError(f"Node cannot be its own parent: {node_id}")

        async with self._lock:
            descendants = await self._collect_descendants(node_id)
            if any(d.id == parent_id for d in descendants):
                logger.warning(
                    "Rejected reparent of %s: %s is one of its descendants", node_id, parent_id
                )
                raise InvalidStructureError(
                    node_id, f"Parent {parent_id} is a descendant of node {node_id}"
                )

            try:
                node = await self._store.set_parent(node_id, parent_id)
            except InvalidStructureError:
                logger.warning("Rejected reparent of root node %s", node_id)
                raise
            info = await self._node_info(node)
        logger.info(
            "Reparented node %s under %s (%d descendants moved)",
            node_id, parent_id, len(descendants),
        )
        return info

    async def _collect_descendants(self, node_id: str) -> list[NodeInfo]:
        start = await self._store.get_node(node_id)
        start_info = await self._node_info(start)

        result: list[NodeInfo] = []
        queue = deque((child_id, node_id, start_info.depth + 1) for child_id in start.children)
        while queue:
            child_id, parent_id, depth = queue.popleft()
            child = await self._store.get_node(child_id)
            result.append(
                NodeInfo(id=child.id, parent=parent_id, depth=depth, root=start_info.root)
            )
            queue.extend((grandchild_id, child.id, depth + 1) for grandchild_id in child.children)

        logger.debug("Collected %d descendants of %s", len(result), node_id)
        return result

    async def _node_info(self, node: Node) -> NodeInfo:
        """Walk the parent chain to the root, counting steps."""
        depth = 0
        current = node
        while current.parent is not None:
            depth += 1
            current = await self._store.get_node(current.parent)
        return NodeInfo(id=node.id, parent=node.parent, depth=depth, root=current.id)
