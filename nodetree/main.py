"""nodetree FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nodetree.config import Settings
from nodetree.store.registry import open_store
from nodetree.trees.router import get_tree_service
from nodetree.trees.router import router as nodes_router
from nodetree.trees.service import TreeService

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the configured store and wire the tree service."""
    settings: Settings = app.state.settings
    logging.getLogger("nodetree").setLevel(settings.log_level)

    store = await open_store(settings)
    logger.info("Tree store ready (backend=%s)", store.name)

    service = TreeService(store)
    app.dependency_overrides[get_tree_service] = lambda: service

    app.state.store = store
    yield

    await store.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app. Settings default to the environment plus .env in the working directory."""
    if settings is None:
        load_dotenv(Path.cwd() / ".env")
        settings = Settings.from_env()

    app = FastAPI(
        title="nodetree",
        description="Single rooted tree with insert, reparent and descendant queries",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(nodes_router)

    @app.get("/api/health")
    async def health() -> dict:
        return {"status": "ok", "version": VERSION, "store": settings.store_backend}

    return app


app = create_app()
