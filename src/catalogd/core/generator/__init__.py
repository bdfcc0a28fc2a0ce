"""Synthetic catalog activity."""

from catalogd.core.generator.daemon import CatalogGenerator
from catalogd.core.generator.factory import EntityFactory

__all__ = ["CatalogGenerator", "EntityFactory"]
