"""Content collections served by the public API.

Every read follows the same path: response cache, then (on a miss) a Notion
query, then normalization, then cache store. When Notion cannot be used the
collection's static fallback is returned instead and nothing is cached.
"""

from __future__ import annotations

import copy
import logging
import math
import time
from collections.abc import Callable
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from datetime import UTC, datetime
from typing import Any

from codejedi_portfolio.config import SiteConfig
from codejedi_portfolio.constants.fallback_content import (
    ARCHIVED_BLOG_POSTS,
    CONTACTS,
    FALLBACK_ABOUT_IMAGES,
    FALLBACK_BLOG_POSTS,
    FALLBACK_CERTIFICATES,
    FALLBACK_HUGGING_FACE_CERTIFICATES,
    FALLBACK_IMAGES,
    FALLBACK_PROJECTS,
    FALLBACK_SKILLS,
    FALLBACK_WORK_EXPERIENCE,
)
from codejedi_portfolio.models import WorkExperienceEntry
from codejedi_portfolio.services.field_resolver import present_property_names
from codejedi_portfolio.services.normalizers import (
    IMAGE_SORT_PROPERTIES,
    build_skill_categories,
    build_timeline,
    normalize_about_image,
    normalize_blog_post,
    normalize_certificate,
    normalize_image,
    normalize_project,
    normalize_work_experience,
    sort_blog_posts,
    sort_certificates,
    sort_work_experience,
)
from codejedi_portfolio.services.notion_client import NotionClient, NotionError
from codejedi_portfolio.services.response_cache import ResponseCache
from codejedi_portfolio.services.text_utils import blocks_to_markdown

logger = logging.getLogger(__name__)

__all__ = ["ContentService", "UnknownDatabaseError"]

CREATED_DESCENDING = [{"timestamp": "created_time", "direction": "descending"}]
CREATED_ASCENDING = [{"timestamp": "created_time", "direction": "ascending"}]


class UnknownDatabaseError(LookupError):
    """Raised when the pass-through proxy is asked for an unmapped database name."""

    def __init__(self, name: str, available: list[str]) -> None:
        super().__init__(
            f"Database '{name}' not found. Available databases: {', '.join(available)}"
        )
        self.name = name
        self.available = available


class IncompleteContentError(Exception):
    """Carries a collection built with placeholders for page bodies that failed to load."""

    def __init__(self, value: Any, missing: list[str]) -> None:
        super().__init__(f"{len(missing)} page bodies unavailable")
        self.value = value
        self.missing = missing


def _raise_if_incomplete(value: Any, bodies: dict[str, str | None]) -> Any:
    missing = [page_id for page_id, body in bodies.items() if body is None]
    if missing:
        raise IncompleteContentError(value, missing)
    return value


def _now_iso() -> str:
    return datetime.now(UTC).isoformat()


class ContentService:
    """Loads, normalizes and caches each portfolio content collection."""

    def __init__(self, config: SiteConfig, client: NotionClient, cache: ResponseCache) -> None:
        self.config = config
        self.client = client
        self.cache = cache

    # ---- shared plumbing ----

    def _database_id(self, collection: str) -> str:
        database_id = self.config.database_id(collection)
        if not database_id:
            raise NotionError(f"No database id configured for {collection}")
        return database_id

    def _load(
        self,
        key: str,
        fetcher: Callable[[], Any],
        fallback: Any,
        ttl: float | None = None,
    ) -> Any:
        """Return the cached or freshly fetched collection, or a copy of ``fallback``.

        A collection with missing page bodies is served but not cached.
        """
        ttl = self.config.cache_ttl_seconds if ttl is None else ttl
        try:
            return self.cache.get_or_fetch(key, ttl, fetcher)
        except IncompleteContentError as e:
            logger.warning("Not caching %s content: %s", key, e)
            return e.value
        except NotionError as e:
            logger.warning("Serving fallback %s content: %s", key, e)
        except Exception:
            logger.exception("Failed to load %s content; serving fallback", key)
        return copy.deepcopy(fallback)

    def _page_markdown(self, page_id: str) -> str:
        blocks = self.client.list_block_children(
            page_id, timeout=self.config.nested_fetch_timeout
        )
        return blocks_to_markdown(blocks)

    def fetch_page_bodies(self, pages: list[dict[str, Any]]) -> dict[str, str | None]:
        """Fetch the markdown body of each page concurrently.

        Each page gets the nested fetch timeout measured from when its own fetch
        starts, so pages queued behind busy workers are not penalized. A page
        whose fetch fails or overruns maps to None; its siblings are unaffected.
        """
        page_ids = [page["id"] for page in pages if page.get("id")]
        if not page_ids:
            return {}

        timeout = self.config.nested_fetch_timeout
        workers = max(1, min(self.config.max_fetch_workers, len(page_ids)))
        # Queued pages run in batches of ``workers``; allow one extra round for stragglers.
        batch_deadline = time.monotonic() + timeout * (math.ceil(len(page_ids) / workers) + 1)
        started: dict[str, float] = {}

        def fetch(page_id: str) -> str:
            started[page_id] = time.monotonic()
            return self._page_markdown(page_id)

        bodies: dict[str, str | None] = dict.fromkeys(page_ids)
        pool = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="notion-blocks")
        try:
            futures: dict[Future[str], str] = {
                pool.submit(fetch, page_id): page_id for page_id in page_ids
            }
            pending = set(futures)
            while pending:
                now = time.monotonic()
                expired = {
                    future
                    for future in pending
                    if now >= min(started.get(futures[future], now) + timeout, batch_deadline)
                    and not future.done()
                }
                for future in expired:
                    logger.warning("Timed out fetching content for page %s", futures[future])
                pending -= expired
                if not pending:
                    break

                deadlines = [
                    started[futures[future]] + timeout
                    for future in pending
                    if futures[future] in started
                ]
                next_deadline = min([*deadlines, batch_deadline])
                done, pending = wait(
                    pending, timeout=max(0.0, next_deadline - now), return_when=FIRST_COMPLETED
                )
                for future in done:
                    page_id = futures[future]
                    try:
                        bodies[page_id] = future.result()
                    except Exception as e:
                        logger.warning("Failed to fetch content for page %s: %s", page_id, e)
        finally:
            pool.shutdown(wait=False, cancel_futures=True)
        return bodies

    # ---- work experience ----

    def _fetch_work_experience(self) -> list[dict[str, Any]]:
        pages = self.client.query_database(self._database_id("work_experience"))
        entries = sort_work_experience(normalize_work_experience(page) for page in pages)
        logger.info("Fetched %d work experience entries", len(entries))
        return [entry.to_public() for entry in entries]

    def work_experience(self) -> list[dict[str, Any]]:
        return self._load("work_experience", self._fetch_work_experience, FALLBACK_WORK_EXPERIENCE)

    def work_experience_timeline(self) -> list[dict[str, Any]]:
        """Work experience grouped by year for the timeline view."""
        entries = [WorkExperienceEntry.model_validate(item) for item in self.work_experience()]
        return [group.to_public() for group in build_timeline(entries)]

    # ---- blog ----

    def _fetch_blog_posts(self) -> list[dict[str, Any]]:
        pages = self.client.query_database(self._database_id("blogs"))
        bodies = self.fetch_page_bodies(pages)
        posts = sort_blog_posts(
            normalize_blog_post(page, bodies.get(page.get("id", "")), self.config.site_author)
            for page in pages
        )
        logger.info("Fetched %d blog posts", len(posts))
        return _raise_if_incomplete([post.to_public() for post in posts], bodies)

    def blog_posts(self) -> list[dict[str, Any]]:
        return self._load("blogs", self._fetch_blog_posts, FALLBACK_BLOG_POSTS)

    def blog_post(self, slug: str) -> dict[str, Any] | None:
        """Find a post by slug in the live collection, then in the archive."""
        for post in self.blog_posts():
            if post.get("slug") == slug:
                return post
        for post in ARCHIVED_BLOG_POSTS:
            if post["slug"] == slug:
                return copy.deepcopy(post)
        return None

    # ---- projects ----

    def _fetch_projects(self) -> list[dict[str, Any]]:
        pages = self.client.query_database(
            self._database_id("side_projects"), sorts=CREATED_DESCENDING
        )
        bodies = self.fetch_page_bodies(pages)
        projects = [
            normalize_project(page, bodies.get(page.get("id", ""))).to_public() for page in pages
        ]
        return _raise_if_incomplete(projects, bodies)

    def projects(self) -> list[dict[str, Any]]:
        return self._load("projects", self._fetch_projects, FALLBACK_PROJECTS)

    # ---- certificates ----

    def _certificates_fetcher(self, collection: str) -> Callable[[], list[dict[str, Any]]]:
        def fetch() -> list[dict[str, Any]]:
            pages = self.client.query_database(self._database_id(collection))
            certificates = sort_certificates(normalize_certificate(page) for page in pages)
            logger.info("Fetched %d %s", len(certificates), collection)
            return [certificate.to_public() for certificate in certificates]

        return fetch

    def certificates(self) -> list[dict[str, Any]]:
        return self._load(
            "certificates",
            self._certificates_fetcher("certificates"),
            FALLBACK_CERTIFICATES,
            ttl=self.config.certificate_cache_ttl_seconds,
        )

    def hugging_face_certificates(self) -> list[dict[str, Any]]:
        return self._load(
            "hugging_face_certificates",
            self._certificates_fetcher("hugging_face_certificates"),
            FALLBACK_HUGGING_FACE_CERTIFICATES,
            ttl=self.config.certificate_cache_ttl_seconds,
        )

    # ---- images ----

    def _image_sorts(self, database_id: str) -> list[dict[str, Any]]:
        """Sort by the first date-like property the database has, newest first."""
        schema = self.client.retrieve_database(database_id)
        available = present_property_names(schema, IMAGE_SORT_PROPERTIES)
        if available:
            return [{"property": available[0], "direction": "descending"}]
        return CREATED_DESCENDING

    def _fetch_images(self) -> list[dict[str, Any]]:
        database_id = self._database_id("images")
        pages = self.client.query_database(database_id, sorts=self._image_sorts(database_id))
        return [normalize_image(page).to_public() for page in pages]

    def images(self) -> list[dict[str, Any]]:
        return self._load("images", self._fetch_images, FALLBACK_IMAGES)

    def _fetch_about_images(self) -> list[dict[str, Any]]:
        pages = self.client.query_database(
            self._database_id("about_images"), sorts=CREATED_ASCENDING
        )
        return [normalize_about_image(page).to_public() for page in pages]

    def about_images(self) -> list[dict[str, Any]]:
        return self._load("about_images", self._fetch_about_images, FALLBACK_ABOUT_IMAGES)

    # ---- skills ----

    def _fetch_skills(self) -> dict[str, Any]:
        pages = self.client.query_database(self._database_id("skills"))
        categories = build_skill_categories(pages)
        return {
            "skills": [category.to_public() for category in categories],
            "totalSkillsInDatabase": len(pages),
        }

    def skills(self) -> dict[str, Any]:
        """Displayable skill categories plus a summary of the source data.

        An empty category list is replaced by the fallback skills.
        """
        fallback = {"skills": [], "totalSkillsInDatabase": 0}
        data = self._load("skills", self._fetch_skills, fallback)
        skills = data.get("skills") or copy.deepcopy(FALLBACK_SKILLS)
        return {
            "skills": skills,
            "meta": {
                "totalSkillsInDatabase": data.get("totalSkillsInDatabase", 0),
                "categoriesDisplayed": len(data.get("skills") or []),
                "analysisTimestamp": _now_iso(),
            },
        }

    # ---- contacts ----

    def contacts(self) -> list[dict[str, Any]]:
        return copy.deepcopy(CONTACTS)

    # ---- pass-through proxy ----

    def database_mappings(self) -> dict[str, str]:
        return self.config.proxy_databases

    def _proxy_database_id(self, name: str) -> str:
        mappings = self.database_mappings()
        if name not in mappings:
            raise UnknownDatabaseError(name, list(mappings))
        return mappings[name]

    def proxy_query(self, name: str) -> dict[str, Any]:
        """Return one page of raw query results for a mapped database.

        Raises:
            UnknownDatabaseError: If ``name`` is not a mapped database.
        """
        database_id = self._proxy_database_id(name)
        logger.info("Querying Notion database: %s (%s)", name, database_id)
        try:
            data = self.client.query_database_page(database_id, sorts=CREATED_DESCENDING)
        except NotionError as e:
            logger.warning("Proxy query for %s failed: %s", name, e)
            return {
                "database": name,
                "databaseId": database_id,
                "results": [],
                "hasMore": False,
                "nextCursor": None,
                "error": str(e),
            }
        return {
            "database": name,
            "databaseId": database_id,
            "results": data.get("results") or [],
            "hasMore": bool(data.get("has_more")),
            "nextCursor": data.get("next_cursor"),
        }

    def proxy_page(self, name: str, page_id: str) -> dict[str, Any]:
        """Return a raw page and its child blocks.

        Raises:
            UnknownDatabaseError: If ``name`` is not a mapped database.
            NotionError: If the page or its blocks cannot be read.
        """
        database_id = self._proxy_database_id(name)
        page = self.client.retrieve_page(page_id)
        blocks = self.client.list_block_children(page_id)
        return {"database": name, "databaseId": database_id, "page": page, "blocks": blocks}

    # ---- diagnostics ----

    def status(self) -> dict[str, Any]:
        """Cache and configuration summary for the admin dashboard (no secrets)."""
        entries = self.cache.entries()
        return {
            "timestamp": _now_iso(),
            "hasNotionSecret": self.config.has_notion_secret,
            "environment": self.config.environment,
            "databases": {
                collection: bool(database_id)
                for collection, database_id in self.config.database_ids.items()
            },
            "cache": {
                "enabled": self.cache.enabled,
                "backend": self.cache.backend,
                "ttlSeconds": self.config.cache_ttl_seconds,
                "certificateTtlSeconds": self.config.certificate_cache_ttl_seconds,
                "entries": entries,
            },
            "cors": {
                "allowAllOrigins": self.config.allow_all_origins,
                "allowedOrigins": self.config.allowed_origins,
            },
        }
