from __future__ import annotations

import pytest

from codejedi_portfolio.config import (
    CERTIFICATE_CACHE_TTL_SECONDS,
    DEFAULT_CACHE_TTL_SECONDS,
    SiteConfig,
)
from codejedi_portfolio.constants.notion_databases import (
    DATABASE_ID_ENV_VARS,
    DEFAULT_ALLOWED_ORIGINS,
    DEFAULT_DATABASE_IDS,
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (
        "NOTION_INTEGRATION_SECRET",
        "ALLOWED_ORIGINS",
        "ALLOW_ALL_ORIGINS",
        "APP_ENV",
        "DISABLE_CACHE",
        "CACHE_TTL",
        "CACHE_DB_URL",
        "NOTION_TIMEOUT",
        "SITE_AUTHOR",
        *DATABASE_ID_ENV_VARS.values(),
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    config = SiteConfig.from_env()

    assert config.notion_secret == ""
    assert not config.has_notion_secret
    assert config.database_ids == DEFAULT_DATABASE_IDS
    assert config.allowed_origins == list(DEFAULT_ALLOWED_ORIGINS)
    assert config.cache_ttl_seconds == DEFAULT_CACHE_TTL_SECONDS
    assert config.certificate_cache_ttl_seconds == CERTIFICATE_CACHE_TTL_SECONDS
    assert config.cache_url is None
    assert not config.is_development


def test_environment_overrides(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("NOTION_INTEGRATION_SECRET", "secret_x")
    clean_env.setenv("BLOGS_DATABASE_ID", " blog-db ")
    clean_env.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example,")
    clean_env.setenv("ALLOW_ALL_ORIGINS", "true")
    clean_env.setenv("APP_ENV", "development")
    clean_env.setenv("DISABLE_CACHE", "TRUE")
    clean_env.setenv("CACHE_TTL", "120")
    clean_env.setenv("SITE_AUTHOR", "Someone")

    config = SiteConfig.from_env()

    assert config.has_notion_secret
    assert config.database_id("blogs") == "blog-db"
    assert config.allowed_origins == ["https://a.example", "https://b.example"]
    assert config.allow_all_origins
    assert config.is_development
    assert config.cache_disabled
    assert config.cache_ttl_seconds == 120
    assert config.site_author == "Someone"


def test_invalid_numbers_fall_back_to_defaults(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("CACHE_TTL", "soon")
    clean_env.setenv("NOTION_TIMEOUT", "")

    config = SiteConfig.from_env()

    assert config.cache_ttl_seconds == DEFAULT_CACHE_TTL_SECONDS
    assert config.request_timeout == 10.0


def test_proxy_databases_skip_unconfigured_collections() -> None:
    ids = {**DEFAULT_DATABASE_IDS, "images": ""}
    config = SiteConfig(database_ids=ids)

    assert set(config.proxy_databases) == {"work-experience", "blogs", "side-project-technical"}
    assert config.proxy_databases["blogs"] == DEFAULT_DATABASE_IDS["blogs"]
