"""uvicorn server that closes the catalog store as soon as shutdown begins."""

from __future__ import annotations

import socket

import structlog
import uvicorn

from catalogd.core.store import CatalogStore

logger = structlog.get_logger(__name__)


class CatalogServer(uvicorn.Server):
    """uvicorn server bound to a catalog store.

    uvicorn waits for open connections before running the lifespan exit,
    and an event stream stays open until its feed closes. The store is
    therefore shut down first, which ends every stream and lets the
    connections drain.
    """

    def __init__(self, config: uvicorn.Config, store: CatalogStore) -> None:
        super().__init__(config)
        self.store = store

    async def shutdown(self, sockets: list[socket.socket] | None = None) -> None:
        logger.info("Server shutting down, closing change feed")
        self.store.shutdown()
        await super().shutdown(sockets=sockets)
