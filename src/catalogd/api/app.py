"""FastAPI application for the catalog service."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalogd import __version__
from catalogd.api.routes import catalog, events
from catalogd.core.generator import CatalogGenerator
from catalogd.core.models.config import Config
from catalogd.core.store import CatalogStore

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = structlog.get_logger(__name__)

# Global store reference
_store: CatalogStore | None = None


def get_store() -> CatalogStore:
    """Get the global store instance."""
    if _store is None:
        raise RuntimeError("Store not initialized. Call create_app() first.")
    return _store


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler."""
    config: Config = app.state.config
    store: CatalogStore = app.state.store
    generator: CatalogGenerator | None = None

    logger.info("Starting catalog API")

    if config.generator.enabled:
        generator = CatalogGenerator(store, config.generator)
        await generator.start()
    app.state.generator = generator

    yield

    logger.info("Shutting down catalog API")

    if generator is not None:
        await generator.stop()

    store.shutdown()


def create_app(store: CatalogStore | None = None, config: Config | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        store: Optional store instance. A new one is built from
               ``config.store`` when omitted.
        config: Optional configuration, defaults to environment settings.

    Returns:
        Configured FastAPI application.
    """
    global _store
    config = config or Config()
    _store = store or CatalogStore.from_config(config.store)

    app = FastAPI(
        title="catalogd",
        description="Module and template catalog with live updates",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.store = _store
    app.state.generator = None

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(events.router, tags=["events"])
    app.include_router(catalog.router, tags=["catalog"])

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    logger.info("FastAPI app created", generator_enabled=config.generator.enabled)
    return app
