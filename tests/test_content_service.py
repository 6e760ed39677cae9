"""Tests for content collection loading, caching and fallbacks."""

from __future__ import annotations

import time

import pytest
from notion_factories import (
    FakeNotionClient,
    checkbox,
    date,
    files,
    heading,
    page,
    paragraph,
    rich_text,
    select,
    title,
)

from codejedi_portfolio.config import SiteConfig
from codejedi_portfolio.constants.fallback_content import (
    FALLBACK_CERTIFICATES,
    FALLBACK_HUGGING_FACE_CERTIFICATES,
    FALLBACK_PROJECTS,
    FALLBACK_SKILLS,
    FALLBACK_WORK_EXPERIENCE,
)
from codejedi_portfolio.services.content import ContentService, UnknownDatabaseError
from codejedi_portfolio.services.normalizers import CONTENT_UNAVAILABLE
from codejedi_portfolio.services.notion_client import NotionError
from codejedi_portfolio.services.response_cache import ResponseCache


def _db(config: SiteConfig, collection: str) -> str:
    return config.database_id(collection)


class TestWorkExperience:
    def test_normalized_and_sorted(
        self,
        content_service: ContentService,
        fake_notion: FakeNotionClient,
        site_config: SiteConfig,
    ) -> None:
        fake_notion.databases[_db(site_config, "work_experience")] = [
            page("old", {"Title": title("Old"), "Date": date("2022-01-03")}),
            page("new", {"Title": title("New"), "Date": date("2024-09-03", "2024-12-20")}),
        ]

        entries = content_service.work_experience()

        assert [e["id"] for e in entries] == ["new", "old"]
        assert entries[0]["dateRange"] == "Sep ~ Dec, 2024"

    def test_source_failure_serves_fallback(
        self, content_service: ContentService, fake_notion: FakeNotionClient
    ) -> None:
        fake_notion.error = NotionError("unauthorized", status_code=401)

        assert content_service.work_experience() == FALLBACK_WORK_EXPERIENCE

    def test_fallback_is_not_cached(
        self,
        content_service: ContentService,
        fake_notion: FakeNotionClient,
        site_config: SiteConfig,
    ) -> None:
        fake_notion.error = NotionError("down")
        content_service.work_experience()

        fake_notion.error = None
        fake_notion.databases[_db(site_config, "work_experience")] = [
            page("live", {"Title": title("Live"), "Date": date("2024-01-01")})
        ]
        assert [e["id"] for e in content_service.work_experience()] == ["live"]

    def test_unexpected_errors_also_serve_fallback(
        self, content_service: ContentService, fake_notion: FakeNotionClient
    ) -> None:
        fake_notion.error = KeyError("results")

        assert content_service.work_experience() == FALLBACK_WORK_EXPERIENCE

    def test_timeline_from_fallback_data(
        self, content_service: ContentService, fake_notion: FakeNotionClient
    ) -> None:
        fake_notion.error = NotionError("down")

        timeline = content_service.work_experience_timeline()

        years = [group["year"] for group in timeline]
        assert years == sorted(years, reverse=True)
        positions = sum(len(group["positions"]) for group in timeline)
        assert positions == len(FALLBACK_WORK_EXPERIENCE)


def test_results_are_served_from_cache_within_ttl(
    content_service: ContentService, fake_notion: FakeNotionClient, site_config: SiteConfig
) -> None:
    database_id = _db(site_config, "work_experience")
    fake_notion.databases[database_id] = [page("a", {"Title": title("A")})]

    content_service.work_experience()
    fake_notion.databases[database_id] = [page("b", {"Title": title("B")})]

    assert [e["id"] for e in content_service.work_experience()] == ["a"]
    assert len(fake_notion.queries) == 1


class TestBlog:
    @pytest.fixture
    def blog_db(self, fake_notion: FakeNotionClient, site_config: SiteConfig) -> str:
        database_id = _db(site_config, "blogs")
        fake_notion.databases[database_id] = [
            page("b1", {"Name": title("First Post"), "Date": date("2024-01-01")}),
            page("b2", {"Name": title("Second Post"), "Date": date("2024-06-01")}),
        ]
        fake_notion.blocks["b1"] = [heading(2, "Intro"), paragraph("Hello")]
        fake_notion.blocks["b2"] = [paragraph("World")]
        return database_id

    def test_bodies_are_fetched_per_post(
        self, content_service: ContentService, blog_db: str
    ) -> None:
        posts = content_service.blog_posts()

        assert [p["slug"] for p in posts] == ["second-post", "first-post"]
        assert posts[1]["content"] == "## Intro\n\nHello"
        assert posts[0]["excerpt"] == "World"

    def test_failed_body_fetch_only_affects_that_post(
        self, content_service: ContentService, fake_notion: FakeNotionClient, blog_db: str
    ) -> None:
        fake_notion.failing_blocks.add("b1")

        posts = {p["id"]: p for p in content_service.blog_posts()}

        assert posts["b1"]["content"] == CONTENT_UNAVAILABLE
        assert posts["b2"]["content"] == "World"

    def test_slow_body_fetch_times_out_to_placeholder(
        self,
        fake_notion: FakeNotionClient,
        response_cache: ResponseCache,
        site_config: SiteConfig,
        blog_db: str,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        config = site_config.model_copy(update={"nested_fetch_timeout": 0.2})
        service = ContentService(config, fake_notion, response_cache)
        original = fake_notion.list_block_children

        def slow_for_b1(block_id: str, *, timeout: float | None = None) -> list[dict]:
            if block_id == "b1":
                time.sleep(1.0)
            return original(block_id, timeout=timeout)

        monkeypatch.setattr(fake_notion, "list_block_children", slow_for_b1)

        posts = {p["id"]: p for p in service.blog_posts()}

        assert posts["b1"]["content"] == CONTENT_UNAVAILABLE
        assert posts["b2"]["content"] == "World"

    def test_queued_pages_get_their_own_timeout(
        self,
        fake_notion: FakeNotionClient,
        response_cache: ResponseCache,
        site_config: SiteConfig,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        database_id = _db(site_config, "blogs")
        fake_notion.databases[database_id] = [
            page(f"b{i}", {"Name": title(f"Post {i}")}) for i in range(4)
        ]
        for i in range(4):
            fake_notion.blocks[f"b{i}"] = [paragraph(f"body {i}")]
        config = site_config.model_copy(
            update={"nested_fetch_timeout": 0.5, "max_fetch_workers": 2}
        )
        service = ContentService(config, fake_notion, response_cache)
        original = fake_notion.list_block_children

        def slow(block_id: str, *, timeout: float | None = None) -> list[dict]:
            time.sleep(0.3)
            return original(block_id, timeout=timeout)

        monkeypatch.setattr(fake_notion, "list_block_children", slow)

        posts = {p["id"]: p for p in service.blog_posts()}

        assert [posts[f"b{i}"]["content"] for i in range(4)] == [
            f"body {i}" for i in range(4)
        ]

    def test_missing_body_is_not_cached(
        self,
        content_service: ContentService,
        fake_notion: FakeNotionClient,
        response_cache: ResponseCache,
        blog_db: str,
    ) -> None:
        fake_notion.failing_blocks.add("b2")

        first = {p["id"]: p for p in content_service.blog_posts()}
        assert first["b2"]["content"] == CONTENT_UNAVAILABLE
        assert response_cache.entries() == []

        fake_notion.failing_blocks.clear()
        second = {p["id"]: p for p in content_service.blog_posts()}

        assert second["b2"]["content"] == "World"
        assert [entry["key"] for entry in response_cache.entries()] == ["blogs"]

    def test_blog_post_by_slug(self, content_service: ContentService, blog_db: str) -> None:
        assert content_service.blog_post("first-post")["id"] == "b1"
        archived = content_service.blog_post("hugging-face-agents-journey")
        assert archived["category"] == "Learning"
        assert content_service.blog_post("missing") is None

    def test_source_failure_serves_empty_collection(
        self, content_service: ContentService, fake_notion: FakeNotionClient
    ) -> None:
        fake_notion.error = NotionError("down")
        assert content_service.blog_posts() == []


def test_projects_query_newest_first_and_use_page_body(
    content_service: ContentService, fake_notion: FakeNotionClient, site_config: SiteConfig
) -> None:
    database_id = _db(site_config, "side_projects")
    fake_notion.databases[database_id] = [
        page("p1", {"Name": title("Portfolio"), "Description": rich_text("Site")})
    ]
    fake_notion.blocks["p1"] = [paragraph("Long form")]

    projects = content_service.projects()

    assert projects[0]["longDescription"] == "Long form"
    assert fake_notion.queries[0] == (
        database_id,
        [{"timestamp": "created_time", "direction": "descending"}],
    )


def test_projects_fallback(content_service: ContentService, fake_notion: FakeNotionClient) -> None:
    fake_notion.error = NotionError("down")
    assert content_service.projects() == FALLBACK_PROJECTS


class TestCertificates:
    def test_unconfigured_database_serves_fallback(self, content_service: ContentService) -> None:
        assert content_service.certificates() == FALLBACK_CERTIFICATES
        assert content_service.hugging_face_certificates() == FALLBACK_HUGGING_FACE_CERTIFICATES

    def test_configured_database_is_sorted_oldest_first(
        self,
        fake_notion: FakeNotionClient,
        response_cache: ResponseCache,
        site_config: SiteConfig,
    ) -> None:
        ids = {**site_config.database_ids, "certificates": "certs-db"}
        config = site_config.model_copy(update={"database_ids": ids})
        fake_notion.databases["certs-db"] = [
            page("c2", {"Name": title("Later"), "Date": date("2025-02-01"),
                        "Image": files("https://img/2.png")}),
            page("c1", {"Name": title("Earlier"), "Date": date("2023-05-01"),
                        "Image": files("https://img/1.png")}),
        ]

        certificates = ContentService(config, fake_notion, response_cache).certificates()

        assert [c["name"] for c in certificates] == ["Earlier", "Later"]
        assert certificates[0]["date"] == "1 May 2023"


class TestImages:
    def test_sorted_by_first_available_date_property(
        self,
        content_service: ContentService,
        fake_notion: FakeNotionClient,
        site_config: SiteConfig,
    ) -> None:
        database_id = _db(site_config, "images")
        fake_notion.schemas[database_id] = {"properties": {"Date": {}, "Created time": {}}}
        fake_notion.databases[database_id] = [
            page("i1", {"Name": title("Sunset"), "Files": files("https://img/s.jpg")})
        ]

        images = content_service.images()

        assert images[0]["imageUrl"] == "https://img/s.jpg"
        expected = [{"property": "Created time", "direction": "descending"}]
        assert fake_notion.queries[0][1] == expected

    def test_without_date_properties_sorts_by_created_time(
        self,
        content_service: ContentService,
        fake_notion: FakeNotionClient,
        site_config: SiteConfig,
    ) -> None:
        database_id = _db(site_config, "images")
        fake_notion.databases[database_id] = []

        assert content_service.images() == []
        assert fake_notion.queries[0][1][0]["timestamp"] == "created_time"

    def test_about_images_ascending(
        self,
        content_service: ContentService,
        fake_notion: FakeNotionClient,
        site_config: SiteConfig,
    ) -> None:
        database_id = _db(site_config, "about_images")
        fake_notion.databases[database_id] = [
            page("a1", {"Name": title("about1"), "alt": rich_text("Me")},
                 cover="https://img/me.jpg")
        ]

        assert content_service.about_images() == [
            {"id": "about1", "src": "https://img/me.jpg", "alt": "Me"}
        ]
        assert fake_notion.queries[0][1][0]["direction"] == "ascending"


class TestSkills:
    def test_categories_and_meta(
        self,
        content_service: ContentService,
        fake_notion: FakeNotionClient,
        site_config: SiteConfig,
    ) -> None:
        fake_notion.databases[_db(site_config, "skills")] = [
            page("s1", {"Name": title("Python"), "Category": select("Languages")}),
            page("s2", {"Name": title("Hidden"), "Category": select("Languages"),
                        "display": checkbox(False)}),
        ]

        data = content_service.skills()

        assert data["skills"] == [
            {"id": "languages", "title": "Languages", "icon": "Code", "skills": ["Python"]}
        ]
        assert data["meta"]["totalSkillsInDatabase"] == 2
        assert data["meta"]["categoriesDisplayed"] == 1
        assert data["meta"]["analysisTimestamp"]

    def test_empty_result_uses_fallback_skills(
        self,
        content_service: ContentService,
        fake_notion: FakeNotionClient,
        site_config: SiteConfig,
    ) -> None:
        fake_notion.databases[_db(site_config, "skills")] = []

        data = content_service.skills()

        assert data["skills"] == FALLBACK_SKILLS
        assert data["meta"]["categoriesDisplayed"] == 0

    def test_source_failure_uses_fallback_skills(
        self, content_service: ContentService, fake_notion: FakeNotionClient
    ) -> None:
        fake_notion.error = NotionError("down")
        assert content_service.skills()["skills"] == FALLBACK_SKILLS


class TestProxy:
    def test_query_returns_raw_results(
        self,
        content_service: ContentService,
        fake_notion: FakeNotionClient,
        site_config: SiteConfig,
    ) -> None:
        database_id = _db(site_config, "blogs")
        fake_notion.databases[database_id] = [{"object": "page", "id": "raw"}]

        data = content_service.proxy_query("blogs")

        assert data == {
            "database": "blogs",
            "databaseId": database_id,
            "results": [{"object": "page", "id": "raw"}],
            "hasMore": False,
            "nextCursor": None,
        }

    def test_query_failure_returns_empty_result_with_error(
        self, content_service: ContentService, fake_notion: FakeNotionClient
    ) -> None:
        fake_notion.error = NotionError("down")

        data = content_service.proxy_query("images")

        assert data["results"] == []
        assert data["error"] == "down"

    def test_unknown_database(self, content_service: ContentService) -> None:
        with pytest.raises(UnknownDatabaseError, match="Available databases"):
            content_service.proxy_query("secrets")

    def test_page_with_blocks(
        self, content_service: ContentService, fake_notion: FakeNotionClient
    ) -> None:
        fake_notion.pages["p1"] = {"object": "page", "id": "p1"}
        fake_notion.blocks["p1"] = [paragraph("Body")]

        data = content_service.proxy_page("work-experience", "p1")

        assert data["page"]["id"] == "p1"
        assert data["blocks"][0]["type"] == "paragraph"

    def test_mappings_only_list_configured_databases(
        self, content_service: ContentService
    ) -> None:
        assert set(content_service.database_mappings()) == {
            "work-experience",
            "blogs",
            "side-project-technical",
            "images",
        }


def test_contacts_are_static(content_service: ContentService) -> None:
    contacts = content_service.contacts()
    assert {c["id"] for c in contacts} >= {"linkedin", "email"}
    contacts.clear()
    assert content_service.contacts()


def test_status_reports_cache_entries_without_secrets(
    content_service: ContentService, fake_notion: FakeNotionClient, site_config: SiteConfig
) -> None:
    fake_notion.databases[_db(site_config, "work_experience")] = []
    content_service.work_experience()

    status = content_service.status()

    assert status["hasNotionSecret"] is True
    assert status["cache"]["entries"][0]["key"] == "work_experience"
    assert "secret_test" not in str(status)
