from __future__ import annotations

from datetime import date

import pytest
from notion_factories import heading, paragraph

from codejedi_portfolio.services.text_utils import (
    blocks_to_markdown,
    format_long_date,
    format_month_range,
    make_excerpt,
    parse_iso_date,
    slugify,
    year_of,
)


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("My Journey: AI & Agents!", "my-journey-ai-agents"),
        ("  Leading and trailing  ", "leading-and-trailing"),
        ("already-a-slug", "already-a-slug"),
        ("!!!", ""),
    ],
)
def test_slugify(title: str, expected: str) -> None:
    assert slugify(title) == expected


def test_slugify_is_idempotent() -> None:
    slug = slugify("Hello, World 2024")
    assert slugify(slug) == slug


def test_blocks_to_markdown_handles_headings_and_skips_other_blocks() -> None:
    blocks = [
        heading(1, "Title"),
        paragraph("First paragraph."),
        {"type": "image", "image": {}},
        heading(3, "Small"),
        paragraph(""),
    ]
    assert blocks_to_markdown(blocks) == "# Title\n\nFirst paragraph.\n\n### Small"


def test_make_excerpt_truncates_with_ellipsis() -> None:
    text = "a" * 250
    assert make_excerpt(text) == "a" * 200 + "..."
    assert make_excerpt("short") == "short"


def test_parse_iso_date_accepts_datetimes_and_rejects_garbage() -> None:
    assert parse_iso_date("2024-08-23T10:00:00.000Z") == date(2024, 8, 23)
    assert parse_iso_date("not a date") is None
    assert parse_iso_date(None) is None


def test_format_long_date() -> None:
    assert format_long_date("2024-08-23") == "23 August 2024"
    assert format_long_date("sometime") == "sometime"
    assert format_long_date(None) == ""


def test_format_month_range_and_year() -> None:
    assert format_month_range("2023-01-09", "2023-04-28") == "Jan ~ Apr, 2023"
    assert format_month_range("2023-01-09", None) == "Jan ~ Jan, 2023"
    assert format_month_range(None, None) == ""
    assert year_of("2023-01-09") == "2023"
    assert year_of("") == ""
