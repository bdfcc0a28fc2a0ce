"""catalogd Web API."""

from catalogd.api.app import create_app, get_store

__all__ = [
    "create_app",
    "get_store",
]
