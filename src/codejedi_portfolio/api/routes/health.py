"""Health check routes."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter

from codejedi_portfolio.api.dependencies import ConfigDep

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(config: ConfigDep) -> dict[str, Any]:
    """Return the API status and which Notion settings are present."""
    return {
        "status": "healthy",
        "hasNotionSecret": config.has_notion_secret,
        "databases": {
            collection: bool(database_id)
            for collection, database_id in config.database_ids.items()
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
