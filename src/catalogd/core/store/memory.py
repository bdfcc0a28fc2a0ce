"""In-memory catalog store."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any

import structlog

from catalogd.core.events.bus import DEFAULT_QUEUE_SIZE, ChangeEvent, ChangeFeed
from catalogd.core.events.types import ChangeType
from catalogd.core.models.entity import Entity, EntityKind

if TYPE_CHECKING:
    from catalogd.core.models.config import StoreConfig

logger = structlog.get_logger(__name__)


class CatalogStore:
    """Owns the module and template collections.

    A single lock guards both collections and the closed flag, so every
    operation is atomic to callers on any thread. Mutations publish their
    change event while holding the lock, which keeps events in the same
    order as the mutations themselves.

    Name matching is case-insensitive. Deletion swaps the removed entity
    with the last one, so list order is not stable across deletes.
    """

    def __init__(self, queue_size: int = DEFAULT_QUEUE_SIZE) -> None:
        self._collections: dict[EntityKind, list[Entity]] = {kind: [] for kind in EntityKind}
        self._lock = threading.RLock()
        self._feed = ChangeFeed(max_queue_size=queue_size)
        self._closed = False

    @classmethod
    def from_config(cls, config: StoreConfig) -> CatalogStore:
        """Create a store from configuration."""
        return cls(queue_size=config.queue_size)

    def add(self, kind: EntityKind | str, entity: Entity) -> None:
        """Append an entity and emit ``{kind}_added``.

        No uniqueness check is made on the id.
        """
        kind = EntityKind.from_string(kind)
        with self._lock:
            self._collections[kind].append(entity)
            self._emit(ChangeType.added(kind), entity)

    def delete(self, kind: EntityKind | str, entity_id: str) -> bool:
        """Remove the first entity whose id matches, ignoring case.

        Returns:
            True if an entity was removed, False if none matched
        """
        kind = EntityKind.from_string(kind)
        target = entity_id.lower()

        with self._lock:
            items = self._collections[kind]
            for index, entity in enumerate(items):
                if entity.id.lower() == target:
                    items[index] = items[-1]
                    items.pop()
                    self._emit(ChangeType.deleted(kind), entity)
                    return True
        return False

    def list(self, kind: EntityKind | str, name_filter: str = "") -> list[Entity]:
        """Get a snapshot of entities whose name contains the filter.

        An empty filter returns every entity of the kind.
        """
        kind = EntityKind.from_string(kind)
        needle = name_filter.lower()

        with self._lock:
            items = self._collections[kind]
            if not needle:
                return list(items)
            return [e for e in items if needle in e.name.lower()]

    def suggest(self, kind: EntityKind | str, prefix: str = "") -> list[str]:
        """Get names of entities whose name starts with the prefix."""
        kind = EntityKind.from_string(kind)
        prefix = prefix.lower()

        with self._lock:
            return [e.name for e in self._collections[kind] if e.name.lower().startswith(prefix)]

    def count(self, kind: EntityKind | str) -> int:
        """Get number of entities of a kind."""
        kind = EntityKind.from_string(kind)
        with self._lock:
            return len(self._collections[kind])

    def subscribe(self) -> ChangeFeed:
        """Get the change feed.

        All subscribers share one queue; the feed reports StreamClosed
        once the store has shut down.
        """
        return self._feed

    def shutdown(self) -> None:
        """Close the change feed. Only the first call has any effect."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._feed.close()

        logger.info(
            "Catalog store shut down",
            modules=self.count(EntityKind.MODULE),
            templates=self.count(EntityKind.TEMPLATE),
        )

    def _emit(self, change_type: ChangeType, entity: Entity) -> None:
        """Publish a change event. Caller holds the lock."""
        if self._closed:
            return
        self._feed.publish(ChangeEvent(type=change_type, data=entity))

    @property
    def feed(self) -> ChangeFeed:
        """Get the change feed."""
        return self._feed

    @property
    def is_closed(self) -> bool:
        """Check if the store has shut down."""
        return self._closed

    @property
    def stats(self) -> dict[str, Any]:
        """Get store statistics."""
        with self._lock:
            return {
                "modules": len(self._collections[EntityKind.MODULE]),
                "templates": len(self._collections[EntityKind.TEMPLATE]),
                "closed": self._closed,
                "feed": {
                    **self._feed.stats,
                    "queue_size": self._feed.queue_size,
                    "max_queue_size": self._feed.maxsize,
                },
            }
