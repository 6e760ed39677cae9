"""Shared dependencies for API routes."""

from __future__ import annotations

from collections.abc import Iterator
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from codejedi_portfolio.config import SiteConfig
from codejedi_portfolio.services.content import ContentService
from codejedi_portfolio.services.notion_client import NotionClient
from codejedi_portfolio.services.response_cache import ResponseCache


@lru_cache
def get_config() -> SiteConfig:
    """Return the process-wide configuration, read once from the environment."""
    return SiteConfig.from_env()


@lru_cache
def get_response_cache() -> ResponseCache:
    """Return the process-wide response cache.

    The cache is shared across requests so that its in-memory fallback store
    survives between them.
    """
    config = get_config()
    return ResponseCache(config.cache_url, enabled=not config.cache_disabled)


def get_notion_client(
    config: Annotated[SiteConfig, Depends(get_config)],
) -> Iterator[NotionClient]:
    """Yield a Notion client whose HTTP session is closed after the request."""
    with NotionClient(config) as client:
        yield client


def get_content_service(
    config: Annotated[SiteConfig, Depends(get_config)],
    client: Annotated[NotionClient, Depends(get_notion_client)],
    cache: Annotated[ResponseCache, Depends(get_response_cache)],
) -> ContentService:
    """Build the content service for a request.

    Args:
        config: Site configuration.
        client: Notion API client.
        cache: Shared response cache.

    Returns:
        ContentService: Service wired to the given collaborators.
    """
    return ContentService(config, client, cache)


ConfigDep = Annotated[SiteConfig, Depends(get_config)]
ContentServiceDep = Annotated[ContentService, Depends(get_content_service)]
NotionClientDep = Annotated[NotionClient, Depends(get_notion_client)]
