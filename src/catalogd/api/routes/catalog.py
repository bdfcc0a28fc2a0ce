"""Listing, autocomplete and delete endpoints for modules and templates."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, HTTPException

from catalogd.api.schemas import DeleteResponse, EntityResponse, StatsResponse
from catalogd.core.models.entity import EntityKind
from catalogd.core.store import CatalogStore

logger = structlog.get_logger(__name__)

router = APIRouter()


def _get_store() -> CatalogStore:
    """Get store with late import to avoid circular dependency."""
    from catalogd.api.app import get_store
    return get_store()


def _list(kind: EntityKind, name: str) -> list[EntityResponse]:
    return [EntityResponse.from_entity(e) for e in _get_store().list(kind, name)]


def _delete(kind: EntityKind, entity_id: str) -> DeleteResponse:
    if not _get_store().delete(kind, entity_id):
        raise HTTPException(status_code=404, detail=f"{kind.label} not found")

    logger.info("Entity deleted", kind=kind.value, id=entity_id)
    return DeleteResponse(message=f"{kind.label} deleted")


@router.get("/modules", response_model=list[EntityResponse])
async def list_modules(name: str = "") -> list[EntityResponse]:
    """List modules, optionally filtered by a name substring."""
    return _list(EntityKind.MODULE, name)


@router.get("/templates", response_model=list[EntityResponse])
async def list_templates(name: str = "") -> list[EntityResponse]:
    """List templates, optionally filtered by a name substring."""
    return _list(EntityKind.TEMPLATE, name)


@router.get("/autocomplete/modules", response_model=list[str])
async def autocomplete_modules(prefix: str = "") -> list[str]:
    """Module names starting with the prefix."""
    return _get_store().suggest(EntityKind.MODULE, prefix)


@router.get("/autocomplete/templates", response_model=list[str])
async def autocomplete_templates(prefix: str = "") -> list[str]:
    """Template names starting with the prefix."""
    return _get_store().suggest(EntityKind.TEMPLATE, prefix)


@router.delete("/modules/{entity_id}", response_model=DeleteResponse)
async def delete_module(entity_id: str) -> DeleteResponse:
    """Delete a module by id (case-insensitive)."""
    return _delete(EntityKind.MODULE, entity_id)


@router.delete("/templates/{entity_id}", response_model=DeleteResponse)
async def delete_template(entity_id: str) -> DeleteResponse:
    """Delete a template by id (case-insensitive)."""
    return _delete(EntityKind.TEMPLATE, entity_id)


@router.get("/stats", response_model=StatsResponse)
async def get_stats() -> StatsResponse:
    """Collection sizes and change feed statistics."""
    return StatsResponse(**_get_store().stats)
