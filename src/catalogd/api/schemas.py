"""Pydantic schemas for API request/response models."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from catalogd.core.models.entity import Entity

OperatingSystemName = Literal["Windows", "Linux", "MacOS"]
SourceName = Literal["Partner", "Official"]


class EntityResponse(BaseModel):
    """A module or template as returned by the list endpoints."""

    id: str
    name: str
    description: str
    logo: str
    contributor: str
    operating_system: OperatingSystemName
    source: SourceName
    custom_tags: list[str] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, entity: Entity) -> EntityResponse:
        """Create response from an Entity."""
        return cls(**entity.to_dict())


class DeleteResponse(BaseModel):
    """Result of a successful delete."""

    status: Literal["success"] = "success"
    message: str


class StatsResponse(BaseModel):
    """Collection sizes and change feed counters."""

    modules: int
    templates: int
    closed: bool
    feed: dict[str, Any]
