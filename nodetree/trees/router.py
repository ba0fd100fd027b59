"""FastAPI routes for node creation, reparenting and descendant listing."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from nodetree.errors import (
    DuplicateRootError,
    InvalidArgumentError,
    InvalidStructureError,
    NotFoundError,
)
from nodetree.models import NodeInfo
from nodetree.trees.service import TreeService

router = APIRouter(prefix="/api/v1", tags=["nodes"])


def get_tree_service() -> TreeService:
    """Dependency placeholder — replaced at app startup."""
    raise RuntimeError("TreeService not initialized")


@router.post("/nodes", status_code=status.HTTP_201_CREATED)
async def create_node(
    parent: str | None = Query(default=None),
    service: TreeService = Depends(get_tree_service),
) -> NodeInfo:
    try:
        return await service.add_node(parent)
    except DuplicateRootError as e:
        raise HTTPException(status_code=405, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=406, detail=str(e))


@router.get("/nodes/{node_id}")
async def get_node(
    node_id: str,
    service: TreeService = Depends(get_tree_service),
) -> NodeInfo:
    try:
        return await service.get_node(node_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.patch("/nodes/{node_id}")
async def reparent_node(
    node_id: str,
    parent: str = Query(),
    service: TreeService = Depends(get_tree_service),
) -> NodeInfo:
    try:
        return await service.set_parent(node_id, parent)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except InvalidStructureError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/nodes/{node_id}/descendants")
async def get_descendants(
    node_id: str,
    service: TreeService = Depends(get_tree_service),
) -> list[NodeInfo]:
    try:
        return await service.get_descendants(node_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
