"""Shared test helpers."""

from httpx import AsyncClient

from nodetree.models import NodeInfo
from nodetree.store.base import TreeStore
from nodetree.trees.invariants import find_violations
from nodetree.trees.service import TreeService


async def build_sample_tree(service: TreeService) -> dict[str, NodeInfo]:
    """Build the tree used across tests and return its nodes by label.

        root
        ├── a
        │   └── c
        │       └── d
        └── b
    """
    root = await service.add_node()
    a = await service.add_node(root.id)
    b = await service.add_node(root.id)
    c = await service.add_node(a.id)
    d = await service.add_node(c.id)
    return {"root": root, "a": a, "b": b, "c": c, "d": d}


async def build_chain(service: TreeService, length: int) -> list[NodeInfo]:
    """Root followed by length - 1 nodes, each the child of the previous."""
    chain = [await service.add_node()]
    for _ in range(length - 1):
        chain.append(await service.add_node(chain[-1].id))
    return chain


async def assert_store_consistent(store: TreeStore) -> None:
    """Fail with every violation if the store no longer holds a valid tree."""
    violations = find_violations(await store.list_nodes())
    assert violations == []


async def create_node_via_api(client: AsyncClient, parent: str | None = None) -> dict:
    """POST a node and return the NodeInfo JSON, asserting 201."""
    params = {"parent": parent} if parent is not None else {}
    resp = await client.post("/api/v1/nodes", params=params)
    assert resp.status_code == 201, resp.text
    return resp.json()
