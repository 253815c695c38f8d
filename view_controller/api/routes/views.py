"""API routes for view definitions.

View definitions describe view kinds declaratively. Controllers created
through the API reference them as ``views.<view_key>``.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from view_controller.views.registry import get_view_registry
from view_controller.views.schemas import ViewDefinition, ViewSummary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/views", tags=["views"])


def _get_or_404(view_key: str) -> ViewDefinition:
    """Get a view definition by key or raise 404."""
    registry = get_view_registry()
    view = registry.get(view_key)
    if view is None:
        available = registry.list_keys()
        raise HTTPException(
            status_code=404,
            detail=f"View '{view_key}' not found. Available: {available}",
        )
    return view


@router.get("", response_model=list[ViewSummary])
async def list_views(status: Optional[str] = Query(default=None)):
    """List view definitions (summaries)."""
    return get_view_registry().list_summaries(status=status)


@router.get("/{view_key}", response_model=ViewDefinition)
async def get_view(view_key: str):
    """Get a single view definition by key."""
    return _get_or_404(view_key)


@router.post("", response_model=ViewDefinition, status_code=201)
async def create_view(view: ViewDefinition):
    """Create a new view definition."""
    if not view.view_key:
        raise HTTPException(status_code=400, detail="view_key is required")

    registry = get_view_registry()
    if registry.get(view.view_key) is not None:
        raise HTTPException(
            status_code=409,
            detail=f"View '{view.view_key}' already exists",
        )

    if not registry.save(view.view_key, view):
        raise HTTPException(
            status_code=500,
            detail=f"Failed to save view '{view.view_key}'",
        )

    logger.info(f"Created view: {view.view_key}")
    return view


@router.put("/{view_key}", response_model=ViewDefinition)
async def update_view(view_key: str, view: ViewDefinition):
    """Update an existing view definition."""
    registry = get_view_registry()
    _get_or_404(view_key)

    if view.view_key != view_key:
        raise HTTPException(
            status_code=400,
            detail=f"view_key in body ('{view.view_key}') must match URL ('{view_key}')",
        )

    if not registry.save(view_key, view):
        raise HTTPException(
            status_code=500,
            detail=f"Failed to save view '{view_key}'",
        )

    logger.info(f"Updated view: {view_key}")
    return view


@router.delete("/{view_key}")
async def delete_view(view_key: str):
    """Delete a view definition."""
    if not get_view_registry().delete(view_key):
        raise HTTPException(
            status_code=404,
            detail=f"View '{view_key}' not found",
        )

    logger.info(f"Deleted view: {view_key}")
    return {"deleted": view_key}
