"""Tests for EntityFactory and CatalogGenerator."""

from __future__ import annotations

import asyncio
import random
import re
import uuid
from unittest.mock import patch

import pytest

from catalogd.core.events import ChangeType
from catalogd.core.generator import CatalogGenerator, EntityFactory
from catalogd.core.generator.factory import (
    CONTRIBUTORS,
    LOGO_URLS,
    MAX_TAGS,
    TAGS,
)
from catalogd.core.models.config import GeneratorConfig
from catalogd.core.models.entity import EntityKind
from catalogd.core.store import CatalogStore

NAME_PATTERN = re.compile(r"^(awesome|cool|super|amazing|great)-(module|template)-(dev|code|hack|build|deploy)-\d{1,2}$")


# ============================================================================
# FACTORY TESTS
# ============================================================================


class TestEntityFactory:
    """Tests for random entity generation."""

    @pytest.mark.parametrize("kind", list(EntityKind))
    def test_name_format(self, factory, kind):
        for _ in range(50):
            name = factory.create(kind).name
            assert NAME_PATTERN.match(name), name
            assert f"-{kind.value}-" in name

    def test_description_mentions_kind(self, factory):
        assert "template" in factory.create(EntityKind.TEMPLATE).description

    def test_fields_come_from_vocabularies(self, factory):
        for _ in range(50):
            entity = factory.create(EntityKind.MODULE)
            assert entity.logo in LOGO_URLS
            assert entity.contributor in CONTRIBUTORS
            assert set(entity.custom_tags) <= set(TAGS)

    def test_tags_are_distinct_and_bounded(self, factory):
        for _ in range(100):
            tags = factory.tags()
            assert 1 <= len(tags) <= MAX_TAGS
            assert len(set(tags)) == len(tags)

    def test_id_is_uuid4(self, factory):
        parsed = uuid.UUID(factory.entity_id())
        assert parsed.version == 4

    def test_ids_are_unique(self, factory):
        ids = {factory.entity_id() for _ in range(1000)}
        assert len(ids) == 1000

    def test_seed_makes_output_reproducible(self):
        first = EntityFactory(random.Random(7)).create(EntityKind.MODULE)
        second = EntityFactory(random.Random(7)).create(EntityKind.MODULE)
        assert first == second


# ============================================================================
# GENERATOR TESTS
# ============================================================================


class TestCatalogGenerator:
    """Tests for seeding and the periodic loop."""

    def test_seed_adds_initial_count_per_kind(self, store):
        generator = CatalogGenerator(store, GeneratorConfig(initial_count=25, seed=1))
        assert generator.seed() == 50
        assert store.count(EntityKind.MODULE) == 25
        assert store.count(EntityKind.TEMPLATE) == 25
        assert generator.stats["seeded"] == 50

    def test_seed_zero(self, store):
        generator = CatalogGenerator(store, GeneratorConfig(initial_count=0))
        assert generator.seed() == 0
        assert store.stats["modules"] == 0

    def test_generate_one_adds_and_emits(self, store):
        generator = CatalogGenerator(store, GeneratorConfig(seed=3))
        kind, entity = generator.generate_one()

        assert store.list(kind) == [entity]
        event = asyncio.run(store.subscribe().receive(timeout=0))
        assert event.type is ChangeType.added(kind)
        assert event.data == entity

    def test_generate_one_picks_both_kinds(self, store):
        generator = CatalogGenerator(store, GeneratorConfig(seed=5))
        kinds = {generator.generate_one()[0] for _ in range(50)}
        assert kinds == {EntityKind.MODULE, EntityKind.TEMPLATE}

    def test_seeded_generators_agree(self):
        first_store, second_store = CatalogStore(), CatalogStore()
        config = GeneratorConfig(initial_count=3, seed=11)
        CatalogGenerator(first_store, config).seed()
        CatalogGenerator(second_store, config).seed()
        assert first_store.list(EntityKind.MODULE) == second_store.list(EntityKind.MODULE)

    @pytest.mark.asyncio
    async def test_start_seeds_and_runs(self, store):
        generator = CatalogGenerator(store, GeneratorConfig(initial_count=2, interval=0.01))
        await generator.start()
        await asyncio.sleep(0.1)
        await generator.stop()

        assert generator.is_running is False
        assert generator.stats["generated"] >= 1
        total = store.count(EntityKind.MODULE) + store.count(EntityKind.TEMPLATE)
        assert total == 4 + generator.stats["generated"]

    @pytest.mark.asyncio
    async def test_start_is_idempotent(self, store):
        generator = CatalogGenerator(store, GeneratorConfig(initial_count=1, interval=10))
        await generator.start()
        task = generator._task
        await generator.start()
        assert generator._task is task
        assert generator.stats["seeded"] == 2
        await generator.stop()

    @pytest.mark.asyncio
    async def test_stop_without_start(self, store):
        generator = CatalogGenerator(store)
        await generator.stop()
        assert generator.is_running is False

    @pytest.mark.asyncio
    async def test_loop_survives_errors(self, store):
        """Test that an exception in one iteration does not stop the loop."""
        generator = CatalogGenerator(store, GeneratorConfig(initial_count=0, interval=0.01))
        original = generator.generate_one
        calls = {"n": 0}

        def flaky():
            calls["n"] += 1
            if calls["n"] == 1:
                raise RuntimeError("boom")
            return original()

        with patch.object(generator, "generate_one", side_effect=flaky):
            await generator.start()
            await asyncio.sleep(0.1)
            await generator.stop()

        assert generator.stats["errors"] == 1
        assert calls["n"] >= 2
