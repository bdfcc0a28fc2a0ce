"""Catalog entity data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class EntityKind(str, Enum):
    """Which collection an entity belongs to."""

    MODULE = "module"
    TEMPLATE = "template"

    @classmethod
    def from_string(cls, value: str | EntityKind) -> EntityKind:
        """Parse kind from string, accepting plural forms ("modules")."""
        if isinstance(value, EntityKind):
            return value
        normalized = value.lower().strip()
        if normalized in ("module", "modules"):
            return cls.MODULE
        if normalized in ("template", "templates"):
            return cls.TEMPLATE
        raise ValueError(f"Unknown entity kind: {value}")

    @property
    def label(self) -> str:
        """Capitalized name for user-facing messages."""
        return self.value.capitalize()


class OperatingSystem(str, Enum):
    """Supported operating systems."""

    WINDOWS = "Windows"
    LINUX = "Linux"
    MACOS = "MacOS"


class Source(str, Enum):
    """Where a catalog entry comes from."""

    PARTNER = "Partner"
    OFFICIAL = "Official"


@dataclass(frozen=True)
class Entity:
    """A module or template record.

    Entities never change after construction. Duplicate tags collapse,
    keeping the first occurrence.
    """

    id: str
    name: str
    description: str = ""
    logo: str = ""
    contributor: str = ""
    operating_system: OperatingSystem = OperatingSystem.LINUX
    source: Source = Source.OFFICIAL
    custom_tags: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "operating_system", OperatingSystem(self.operating_system))
        object.__setattr__(self, "source", Source(self.source))
        object.__setattr__(self, "custom_tags", tuple(dict.fromkeys(self.custom_tags)))

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "logo": self.logo,
            "contributor": self.contributor,
            "operating_system": self.operating_system.value,
            "source": self.source.value,
            "custom_tags": list(self.custom_tags),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Entity:
        """Create an entity from a dictionary produced by to_dict()."""
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description", ""),
            logo=data.get("logo", ""),
            contributor=data.get("contributor", ""),
            operating_system=OperatingSystem(data.get("operating_system", "Linux")),
            source=Source(data.get("source", "Official")),
            custom_tags=tuple(data.get("custom_tags", ())),
        )
