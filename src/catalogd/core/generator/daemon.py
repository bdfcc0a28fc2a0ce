"""Background generator that keeps the catalog changing."""

from __future__ import annotations

import asyncio
import contextlib
import random
from typing import TYPE_CHECKING

import structlog

from catalogd.core.generator.factory import EntityFactory
from catalogd.core.models.config import GeneratorConfig
from catalogd.core.models.entity import Entity, EntityKind

if TYPE_CHECKING:
    from catalogd.core.store.memory import CatalogStore

logger = structlog.get_logger(__name__)


class CatalogGenerator:
    """Seeds the store, then adds a random module or template every interval."""

    def __init__(
        self,
        store: CatalogStore,
        config: GeneratorConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """
        Initialize the generator.

        Args:
            store: Store receiving generated entities
            config: Generator configuration
            rng: Random source, defaults to one seeded from config.seed
        """
        self.store = store
        self.config = config or GeneratorConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.factory = EntityFactory(self.rng)

        self._task: asyncio.Task[None] | None = None
        self._running = False
        self._stats = {
            "seeded": 0,
            "generated": 0,
            "errors": 0,
        }

    async def start(self) -> None:
        """Seed the initial data and start the periodic loop."""
        if self._running:
            return

        self._running = True
        self.seed()
        self._task = asyncio.create_task(self._run_loop())
        logger.info("Generator started", interval=self.config.interval)

    async def stop(self) -> None:
        """Stop the periodic loop."""
        if not self._running:
            return

        self._running = False

        if self._task:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None

        logger.info("Generator stopped", stats=self._stats)

    def seed(self) -> int:
        """Add ``initial_count`` modules, then as many templates."""
        added = 0
        for kind in (EntityKind.MODULE, EntityKind.TEMPLATE):
            for _ in range(self.config.initial_count):
                self.store.add(kind, self.factory.create(kind))
                added += 1

        self._stats["seeded"] += added
        logger.info("Added initial data", count=added)
        return added

    def generate_one(self) -> tuple[EntityKind, Entity]:
        """Add a single random module or template."""
        kind = EntityKind.MODULE if self.rng.randrange(2) == 0 else EntityKind.TEMPLATE
        entity = self.factory.create(kind)
        self.store.add(kind, entity)
        self._stats["generated"] += 1
        return kind, entity

    async def _run_loop(self) -> None:
        while self._running:
            try:
                await asyncio.sleep(self.config.interval)
                kind, entity = self.generate_one()
                logger.info("Added entity", kind=kind.value, name=entity.name, id=entity.id)

            except asyncio.CancelledError:
                break
            except Exception as e:
                self._stats["errors"] += 1
                logger.exception("Generator error", error=str(e))

    @property
    def is_running(self) -> bool:
        """Check if the generator loop is running."""
        return self._running

    @property
    def stats(self) -> dict[str, int]:
        """Get generator statistics."""
        return self._stats.copy()
