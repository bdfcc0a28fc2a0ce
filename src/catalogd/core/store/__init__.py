"""Storage layer for the catalog."""

from catalogd.core.store.memory import CatalogStore

__all__ = ["CatalogStore"]
