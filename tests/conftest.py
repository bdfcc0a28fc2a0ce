"""Global test fixtures for catalogd."""

from __future__ import annotations

import random
from collections.abc import Callable

import pytest

from catalogd.core.generator import EntityFactory
from catalogd.core.models.config import Config, GeneratorConfig
from catalogd.core.models.entity import Entity, OperatingSystem, Source
from catalogd.core.store import CatalogStore

# ============================================================================
# ENTITY FIXTURES
# ============================================================================


def build_entity(
    entity_id: str,
    name: str,
    tags: tuple[str, ...] = ("go",),
) -> Entity:
    """Build an entity with fixed metadata."""
    return Entity(
        id=entity_id,
        name=name,
        description=f"Description of {name}",
        logo="https://registry.coder.com/module/code.svg",
        contributor="Coder Team",
        operating_system=OperatingSystem.LINUX,
        source=Source.OFFICIAL,
        custom_tags=tags,
    )


@pytest.fixture
def make_entity() -> Callable[..., Entity]:
    """Factory for entities with fixed metadata."""
    return build_entity


@pytest.fixture
def alpha() -> Entity:
    return build_entity("a1b2c3d4-0000-4000-8000-000000000001", "alpha")


@pytest.fixture
def beta() -> Entity:
    return build_entity("a1b2c3d4-0000-4000-8000-000000000002", "beta")


@pytest.fixture
def factory() -> EntityFactory:
    """Entity factory with a fixed seed."""
    return EntityFactory(random.Random(42))


# ============================================================================
# STORE FIXTURES
# ============================================================================


@pytest.fixture
def store() -> CatalogStore:
    """Fresh store with default feed capacity."""
    return CatalogStore()


@pytest.fixture
def quiet_config() -> Config:
    """Config with the background generator disabled."""
    return Config(generator=GeneratorConfig(enabled=False))
