"""Read-only pass-through routes over the mapped Notion databases."""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, HTTPException, Path, status
from fastapi.responses import JSONResponse

from codejedi_portfolio.api.dependencies import ContentServiceDep
from codejedi_portfolio.api.schemas.notion import DatabaseMappingsResponse
from codejedi_portfolio.services.content import UnknownDatabaseError
from codejedi_portfolio.services.notion_client import NotionError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notion", tags=["notion"])


@router.get("/databases", response_model=DatabaseMappingsResponse)
def list_databases(service: ContentServiceDep) -> DatabaseMappingsResponse:
    """List the database names accepted by the pass-through routes."""
    return DatabaseMappingsResponse(databases=service.database_mappings())


@router.get("/{database}")
def query_database(
    database: Annotated[str, Path(description="Public database name")],
    service: ContentServiceDep,
) -> dict[str, Any]:
    """Return the first page of raw query results for a mapped database."""
    try:
        return service.proxy_query(database)
    except UnknownDatabaseError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.get("/{database}/{page_id}", response_model=None)
def get_database_page(
    database: Annotated[str, Path(description="Public database name")],
    page_id: Annotated[str, Path(description="Notion page id")],
    service: ContentServiceDep,
) -> dict[str, Any] | JSONResponse:
    """Return a raw page with its child blocks."""
    try:
        return service.proxy_page(database, page_id)
    except UnknownDatabaseError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except NotionError as e:
        logger.exception("Failed to retrieve Notion page %s", page_id)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to retrieve Notion page", "details": str(e)},
        )
