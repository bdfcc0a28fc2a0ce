"""Bounded change feed shared by all live subscribers."""

from __future__ import annotations

import asyncio
import threading
import time
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import structlog

from catalogd.core.events.types import ChangeType

if TYPE_CHECKING:
    from catalogd.core.models.entity import Entity

logger = structlog.get_logger(__name__)

DEFAULT_QUEUE_SIZE = 100


class StreamClosed(Exception):
    """Raised by a receive once the feed is closed and drained."""


@dataclass(frozen=True)
class ChangeEvent:
    """One add or delete applied to a collection."""

    type: ChangeType
    data: Entity
    timestamp: float = field(default_factory=time.time)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "type": self.type.value,
            "data": self.data.to_dict(),
            "timestamp": self.timestamp,
        }


def _wake(waiter: asyncio.Future[None]) -> None:
    if not waiter.done():
        waiter.set_result(None)


class ChangeFeed:
    """Single bounded queue of change events.

    Publishing never blocks: once ``max_queue_size`` events are buffered,
    new events are dropped. Every subscriber drains the same queue, so an
    event is handed to exactly one receiver.

    ``publish`` and ``close`` may be called from any thread. Receivers
    await on their own event loop and are woken through
    ``call_soon_threadsafe``. Each publish wakes the longest-waiting
    receiver; close wakes them all.
    """

    def __init__(self, max_queue_size: int = DEFAULT_QUEUE_SIZE) -> None:
        """
        Initialize the feed.

        Args:
            max_queue_size: Maximum number of buffered events
        """
        if max_queue_size < 1:
            raise ValueError("max_queue_size must be at least 1")

        self._maxsize = max_queue_size
        self._buffer: deque[ChangeEvent] = deque()
        self._lock = threading.Lock()
        self._waiters: list[tuple[asyncio.AbstractEventLoop, asyncio.Future[None]]] = []
        self._closed = False
        self._stats = {
            "events_published": 0,
            "events_dropped": 0,
            "events_delivered": 0,
        }

    def publish(self, event: ChangeEvent) -> bool:
        """
        Enqueue an event without blocking.

        Args:
            event: Event to publish

        Returns:
            True if the event was buffered, False if it was dropped
        """
        with self._lock:
            if self._closed:
                return False

            if len(self._buffer) >= self._maxsize:
                self._stats["events_dropped"] += 1
                dropped = True
            else:
                self._buffer.append(event)
                self._stats["events_published"] += 1
                self._wake_next()
                dropped = False

        if dropped:
            logger.debug("Change feed full, dropping event", event_type=event.type.value)
        return not dropped

    async def receive(self, timeout: float | None = None) -> ChangeEvent:
        """
        Wait for the next event.

        Cancelling the awaiting task never loses an event.

        Args:
            timeout: Seconds to wait, or None to wait indefinitely

        Returns:
            The oldest buffered event

        Raises:
            StreamClosed: The feed is closed and no events remain
            TimeoutError: No event arrived within ``timeout``
        """
        loop = asyncio.get_running_loop()
        deadline = None if timeout is None else loop.time() + timeout

        while True:
            with self._lock:
                if self._buffer:
                    self._stats["events_delivered"] += 1
                    return self._buffer.popleft()
                if self._closed:
                    raise StreamClosed("Change feed is closed")
                if deadline is not None and loop.time() >= deadline:
                    raise TimeoutError("No change event within timeout")

                waiter = loop.create_future()
                entry = (loop, waiter)
                self._waiters.append(entry)

            timer = loop.call_at(deadline, _wake, waiter) if deadline is not None else None
            try:
                await waiter
            except asyncio.CancelledError:
                with self._lock:
                    if entry in self._waiters:
                        self._waiters.remove(entry)
                    elif self._buffer:
                        # Woken for an event this task will not take
                        self._wake_next()
                raise
            finally:
                if timer is not None:
                    timer.cancel()

            with self._lock:
                if entry in self._waiters:
                    self._waiters.remove(entry)

    def close(self) -> bool:
        """
        Close the feed and wake every waiting receiver.

        Buffered events are still delivered; afterwards receivers get
        StreamClosed.

        Returns:
            True on the first call, False if already closed
        """
        with self._lock:
            if self._closed:
                return False
            self._closed = True
            self._wake_all()

        logger.info("Change feed closed", stats=self.stats)
        return True

    def _wake_next(self) -> None:
        """Wake the longest-waiting receiver. Caller holds the lock."""
        while self._waiters:
            loop, waiter = self._waiters.pop(0)
            if not loop.is_closed():
                loop.call_soon_threadsafe(_wake, waiter)
                return

    def _wake_all(self) -> None:
        """Wake all waiters. Caller holds the lock."""
        waiters, self._waiters = self._waiters, []
        for loop, waiter in waiters:
            if loop.is_closed():
                continue
            loop.call_soon_threadsafe(_wake, waiter)

    def __aiter__(self) -> ChangeFeed:
        return self

    async def __anext__(self) -> ChangeEvent:
        try:
            return await self.receive()
        except StreamClosed:
            raise StopAsyncIteration from None

    @property
    def is_closed(self) -> bool:
        """Check if the feed has been closed."""
        return self._closed

    @property
    def maxsize(self) -> int:
        """Get buffer capacity."""
        return self._maxsize

    @property
    def queue_size(self) -> int:
        """Get number of buffered events."""
        with self._lock:
            return len(self._buffer)

    @property
    def stats(self) -> dict[str, int]:
        """Get feed statistics."""
        with self._lock:
            return self._stats.copy()


__all__ = ["ChangeEvent", "ChangeFeed", "StreamClosed"]
