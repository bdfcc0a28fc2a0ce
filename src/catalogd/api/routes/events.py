"""Server-Sent Events stream of catalog changes."""

from __future__ import annotations

import json
from collections.abc import AsyncGenerator
from typing import Any

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import StreamingResponse

from catalogd.core.events import ChangeFeed, StreamClosed

logger = structlog.get_logger(__name__)

router = APIRouter()

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "Access-Control-Allow-Origin": "*",
}

# How often a waiting stream checks for client disconnect
POLL_INTERVAL = 1.0


def format_sse(event: str, data: dict[str, Any]) -> str:
    """Frame one SSE message."""
    return f"event: {event}\ndata: {json.dumps(data, separators=(',', ':'), default=str)}\n\n"


async def change_stream(
    feed: ChangeFeed,
    request: Request,
    poll_interval: float = POLL_INTERVAL,
) -> AsyncGenerator[str, None]:
    """Yield SSE frames until the feed closes or the client goes away."""
    yield format_sse("connected", {"status": "connected"})

    while True:
        if await request.is_disconnected():
            logger.debug("Event stream client disconnected")
            return

        try:
            event = await feed.receive(timeout=poll_interval)
        except TimeoutError:
            continue
        except StreamClosed:
            logger.debug("Event stream closed")
            return

        yield format_sse("message", event.to_dict())


@router.get("/events")
async def stream_events(request: Request) -> StreamingResponse:
    """Stream live catalog changes."""
    from catalogd.api.app import get_store

    feed = get_store().subscribe()
    return StreamingResponse(
        change_stream(feed, request),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )
