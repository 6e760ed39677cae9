"""Site configuration built from environment variables.

Loading order: defaults → ``.env`` file → process environment. The resulting
``SiteConfig`` is created once at startup and handed to the Notion client, the
content service and the CORS layer.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from codejedi_portfolio.constants.notion_databases import (
    DATABASE_ID_ENV_VARS,
    DEFAULT_ALLOWED_ORIGINS,
    DEFAULT_DATABASE_IDS,
    NOTION_API_URL,
    NOTION_VERSION,
    PROXY_DATABASE_NAMES,
)

# Load NOTION_INTEGRATION_SECRET, database ids, CORS flags, etc.
load_dotenv()

DEFAULT_CACHE_TTL_SECONDS = 3600
CERTIFICATE_CACHE_TTL_SECONDS = 300
NESTED_FETCH_TIMEOUT_SECONDS = 5.0


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() == "true"


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


class SiteConfig(BaseModel):
    """Runtime settings for the content API."""

    notion_secret: str = ""
    notion_version: str = NOTION_VERSION
    notion_base_url: str = NOTION_API_URL
    database_ids: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_DATABASE_IDS))

    allowed_origins: list[str] = Field(default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS))
    allow_all_origins: bool = False
    environment: str = "production"

    cache_disabled: bool = False
    cache_ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS
    certificate_cache_ttl_seconds: int = CERTIFICATE_CACHE_TTL_SECONDS
    cache_url: str | None = None

    request_timeout: float = 10.0
    nested_fetch_timeout: float = NESTED_FETCH_TIMEOUT_SECONDS
    max_fetch_workers: int = 8

    site_author: str = "Darcy Liu"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    @property
    def has_notion_secret(self) -> bool:
        return bool(self.notion_secret)

    def database_id(self, collection: str) -> str:
        """Return the database id configured for a collection, or ""."""
        return self.database_ids.get(collection, "")

    @property
    def proxy_databases(self) -> dict[str, str]:
        """Public database names exposed by the pass-through proxy, mapped to ids."""
        return {
            name: self.database_id(collection)
            for name, collection in PROXY_DATABASE_NAMES.items()
            if self.database_id(collection)
        }

    @classmethod
    def from_env(cls) -> SiteConfig:
        """Create config from environment variables."""
        database_ids = dict(DEFAULT_DATABASE_IDS)
        for collection, env_name in DATABASE_ID_ENV_VARS.items():
            value = os.environ.get(env_name)
            if value is not None:
                database_ids[collection] = value.strip()

        origins_env = os.environ.get("ALLOWED_ORIGINS")
        allowed_origins = (
            [origin.strip() for origin in origins_env.split(",") if origin.strip()]
            if origins_env
            else list(DEFAULT_ALLOWED_ORIGINS)
        )

        return cls(
            notion_secret=os.environ.get("NOTION_INTEGRATION_SECRET", ""),
            notion_version=os.environ.get("NOTION_VERSION", NOTION_VERSION),
            notion_base_url=os.environ.get("NOTION_API_URL", NOTION_API_URL),
            database_ids=database_ids,
            allowed_origins=allowed_origins,
            allow_all_origins=_env_flag("ALLOW_ALL_ORIGINS"),
            environment=os.environ.get("APP_ENV", "production"),
            cache_disabled=_env_flag("DISABLE_CACHE"),
            cache_ttl_seconds=_env_int("CACHE_TTL", DEFAULT_CACHE_TTL_SECONDS),
            cache_url=os.environ.get("CACHE_DB_URL") or None,
            request_timeout=_env_float("NOTION_TIMEOUT", 10.0),
            site_author=os.environ.get("SITE_AUTHOR", "Darcy Liu"),
        )
