"""Abstract tree store interface.

A store owns node records and keeps each node's parent reference and its
parent's children list consistent. It does not enforce tree-wide rules
(single root, acyclicity); TreeService does.
"""

from abc import ABC, abstractmethod

from nodetree.models import Node


class TreeStore(ABC):
    """Capability interface the tree service depends on."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend identifier (e.g., 'memory')."""
        ...

    @abstractmethod
    async def add_node(self, parent_id: str | None = None) -> Node:
        """Create a node with a fresh id, appended to the parent's children.

        Raises NotFoundError if parent_id does not resolve. A missing
        parent_id creates a parentless node; callers decide whether that is
        allowed.
        """
        ...

    @abstractmethod
    async def get_node(self, node_id: str) -> Node:
        """Return the node. Raises NotFoundError if absent."""
        ...

    @abstractmethod
    async def get_node_count(self) -> int:
        """Total number of stored nodes."""
        ...

    @abstractmethod
    async def set_parent(self, node_id: str, parent_id: str) -> Node:
        """Move node_id under parent_id as one atomic unit.

        Raises NotFoundError if either id does not resolve and
        InvalidStructureError if node_id has no parent.
        """
        ...

    @abstractmethod
    async def list_nodes(self) -> list[Node]:
        """Every stored node, children in attachment order."""
        ...

    async def close(self) -> None:
        """Release backend resources."""
