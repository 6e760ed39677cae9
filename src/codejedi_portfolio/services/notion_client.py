"""Thin client for the Notion REST API.

Only the endpoints the content API needs are wrapped: database queries and
schema lookups, page retrieval and creation, and block children listing.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from codejedi_portfolio.config import SiteConfig

logger = logging.getLogger(__name__)

# Notion caps page_size at 100.
_PAGE_SIZE = 100


class NotionError(RuntimeError):
    """Raised when the Notion API cannot be used or returns an error."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotionClient:
    """Client for the Notion API authenticated with an integration secret."""

    def __init__(self, config: SiteConfig, session: requests.Session | None = None) -> None:
        self.config = config
        self.base_url = config.notion_base_url.rstrip("/")
        self.timeout = config.request_timeout
        self.session = session or requests.Session()
        self._owns_session = session is None

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> NotionClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def is_configured(self) -> bool:
        return self.config.has_notion_secret

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.notion_secret}",
            "Notion-Version": self.config.notion_version,
            "Content-Type": "application/json",
        }

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> dict[str, Any]:
        """Make an authenticated request and return the decoded JSON body."""
        if not self.is_configured:
            raise NotionError("NOTION_INTEGRATION_SECRET is not configured")

        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(
                method,
                url,
                headers=self._headers(),
                json=json,
                params=params,
                timeout=timeout or self.timeout,
            )
        except requests.Timeout as e:
            raise NotionError(f"Notion request timed out: {method} {path}") from e
        except requests.RequestException as e:
            raise NotionError(f"Notion request failed: {e}") from e

        if not response.ok:
            logger.error("Notion API error %s for %s %s", response.status_code, method, path)
            raise NotionError(
                f"Notion API returned {response.status_code}: {response.text[:500]}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise NotionError(f"Notion returned invalid JSON for {method} {path}") from e

    def query_database_page(
        self,
        database_id: str,
        *,
        sorts: list[dict[str, Any]] | None = None,
        filter: dict[str, Any] | None = None,
        start_cursor: str | None = None,
    ) -> dict[str, Any]:
        """Return one page of query results, including ``has_more``/``next_cursor``."""
        if not database_id:
            raise NotionError("No database id configured")
        body: dict[str, Any] = {"page_size": _PAGE_SIZE}
        if sorts:
            body["sorts"] = sorts
        if filter:
            body["filter"] = filter
        if start_cursor:
            body["start_cursor"] = start_cursor
        return self._request("POST", f"/databases/{database_id}/query", json=body)

    def query_database(
        self,
        database_id: str,
        *,
        sorts: list[dict[str, Any]] | None = None,
        filter: dict[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Return every page in a database, following pagination cursors."""
        results: list[dict[str, Any]] = []
        cursor: str | None = None
        while True:
            data = self.query_database_page(
                database_id, sorts=sorts, filter=filter, start_cursor=cursor
            )
            results.extend(data.get("results") or [])
            cursor = data.get("next_cursor")
            if not data.get("has_more") or not cursor:
                return results

    def retrieve_database(self, database_id: str) -> dict[str, Any]:
        """Return the database object, including its property schema."""
        return self._request("GET", f"/databases/{database_id}")

    def retrieve_page(self, page_id: str) -> dict[str, Any]:
        return self._request("GET", f"/pages/{page_id}")

    def list_block_children(
        self, block_id: str, *, timeout: float | None = None
    ) -> list[dict[str, Any]]:
        """Return all child blocks of a page or block."""
        blocks: list[dict[str, Any]] = []
        cursor: str | None = None
        while True:
            params: dict[str, Any] = {"page_size": _PAGE_SIZE}
            if cursor:
                params["start_cursor"] = cursor
            data = self._request(
                "GET", f"/blocks/{block_id}/children", params=params, timeout=timeout
            )
            blocks.extend(data.get("results") or [])
            cursor = data.get("next_cursor")
            if not data.get("has_more") or not cursor:
                return blocks

    def create_page(
        self,
        database_id: str,
        properties: dict[str, Any],
        children: list[dict[str, Any]] | None = None,
    ) -> dict[str, Any]:
        """Create a page in a database and return the created page object."""
        if not database_id:
            raise NotionError("No database id configured")
        body: dict[str, Any] = {
            "parent": {"database_id": database_id},
            "properties": properties,
        }
        if children:
            body["children"] = children
        return self._request("POST", "/pages", json=body)
