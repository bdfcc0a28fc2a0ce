"""API route modules."""

from catalogd.api.routes import catalog, events

__all__ = [
    "catalog",
    "events",
]
