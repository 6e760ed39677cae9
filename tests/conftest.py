from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from notion_factories import FakeNotionClient

import codejedi_portfolio.data.db as app_db
from codejedi_portfolio.api import dependencies
from codejedi_portfolio.api.main import app
from codejedi_portfolio.config import SiteConfig
from codejedi_portfolio.services.content import ContentService
from codejedi_portfolio.services.response_cache import ResponseCache


@pytest.fixture(autouse=True)
def isolated_cache_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[str]:
    """Point the cache database at a temporary SQLite file for every test."""
    db_url = f"sqlite:///{(tmp_path / 'cache.db').as_posix()}"
    monkeypatch.setenv("CACHE_DB_URL", db_url)
    app_db.dispose_engine()
    dependencies.get_config.cache_clear()
    dependencies.get_response_cache.cache_clear()
    yield db_url
    app_db.dispose_engine()
    dependencies.get_config.cache_clear()
    dependencies.get_response_cache.cache_clear()


@pytest.fixture
def site_config(isolated_cache_db: str) -> SiteConfig:
    """Production-like configuration with a dummy secret."""
    return SiteConfig(notion_secret="secret_test", cache_url=isolated_cache_db)


@pytest.fixture
def fake_notion() -> FakeNotionClient:
    return FakeNotionClient()


@pytest.fixture
def response_cache(site_config: SiteConfig) -> ResponseCache:
    return ResponseCache(site_config.cache_url)


@pytest.fixture
def content_service(
    site_config: SiteConfig, fake_notion: FakeNotionClient, response_cache: ResponseCache
) -> ContentService:
    return ContentService(site_config, fake_notion, response_cache)


@pytest.fixture
def client(
    site_config: SiteConfig, fake_notion: FakeNotionClient, response_cache: ResponseCache
) -> Iterator[TestClient]:
    """Test client with configuration, Notion client and cache injected."""
    app.dependency_overrides[dependencies.get_config] = lambda: site_config
    app.dependency_overrides[dependencies.get_notion_client] = lambda: fake_notion
    app.dependency_overrides[dependencies.get_response_cache] = lambda: response_cache
    yield TestClient(app)
    app.dependency_overrides.clear()
