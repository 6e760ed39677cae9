"""Admin dashboard routes."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, status

from codejedi_portfolio.api.dependencies import ContentServiceDep

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/status")
def admin_status(service: ContentServiceDep) -> dict[str, Any]:
    """Return cache ages and configuration flags for the debug dashboard."""
    return service.status()


@router.post("/cache/clear", status_code=status.HTTP_204_NO_CONTENT)
def clear_cache(service: ContentServiceDep) -> None:
    """Drop every cached collection so the next request refetches from Notion."""
    service.cache.invalidate()
