"""Canonical data structures for nodetree.

Node is the stored record; NodeInfo is derived on every read and never
persisted.
"""

from pydantic import BaseModel, Field


class Node(BaseModel):
    id: str
    parent: str | None = None  # None only for the root
    children: list[str] = Field(default_factory=list)  # attachment order

    @property
    def is_root(self) -> bool:
        return self.parent is None


class NodeInfo(BaseModel):
    id: str
    parent: str | None = None
    depth: int  # root = 0
    root: str
