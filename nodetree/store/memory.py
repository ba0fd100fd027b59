"""In-process tree store keeping a materialized children list per node."""

from uuid import uuid4

from nodetree.errors import InvalidStructureError, NotFoundError
from nodetree.models import Node
from nodetree.store.base import TreeStore


class InMemoryTreeStore(TreeStore):
    """Dict-backed store. Returned nodes are copies; callers cannot mutate state."""

    def __init__(self) -> None:
        self._nodes: dict[str, Node] = {}

    @property
    def name(self) -> str:
        return "memory"

    async def add_node(self, parent_id: str | None = None) -> Node:
        parent = self._require(parent_id) if parent_id is not None else None
        node = Node(id=str(uuid4()), parent=parent_id)
        self._nodes[node.id] = node
        if parent is not None:
            parent.children.append(node.id)
        return node.model_copy(deep=True)

    async def get_node(self, node_id: str) -> Node:
        return self._require(node_id).model_copy(deep=True)

    async def get_node_count(self) -> int:
        return len(self._nodes)

    async def set_parent(self, node_id: str, parent_id: str) -> Node:
        node = self._require(node_id)
        if node.is_root:
            raise InvalidStructureError(node_id, f"Node is the root: {node_id}")
        new_parent = self._require(parent_id)
        old_parent = self._nodes[node.parent]

        # All lookups done; the three writes below run without a suspension point.
        old_parent.children.remove(node.id)
        new_parent.children.append(node.id)
        node.parent = new_parent.id
        return node.model_copy(deep=True)

    async def list_nodes(self) -> list[Node]:
        return [node.model_copy(deep=True) for node in self._nodes.values()]

    def _require(self, node_id: str) -> Node:
        try:
            return self._nodes[node_id]
        except KeyError:
            raise NotFoundError(node_id)
