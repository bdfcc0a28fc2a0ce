"""Core data models."""

from catalogd.core.models.config import (
    Config,
    GeneratorConfig,
    LogConfig,
    ServerConfig,
    StoreConfig,
)
from catalogd.core.models.entity import Entity, EntityKind, OperatingSystem, Source

__all__ = [
    # Config
    "Config",
    # Entity
    "Entity",
    "EntityKind",
    "GeneratorConfig",
    "LogConfig",
    "OperatingSystem",
    "ServerConfig",
    "Source",
    "StoreConfig",
]
