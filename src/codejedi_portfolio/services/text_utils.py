"""Text and date helpers used when shaping Notion content."""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import date
from typing import Any

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

EXCERPT_LENGTH = 200

# Block type -> markdown prefix. Other block types are skipped.
_BLOCK_PREFIXES = {
    "paragraph": "",
    "heading_1": "# ",
    "heading_2": "## ",
    "heading_3": "### ",
}


def slugify(title: str) -> str:
    """Lowercase, collapse non-alphanumeric runs to one hyphen, trim hyphens.

    Idempotent: slugifying a slug returns it unchanged.
    """
    return _NON_SLUG_CHARS.sub("-", title.lower()).strip("-")


def _block_text(block: dict[str, Any], block_type: str) -> str:
    payload = block.get(block_type)
    if not isinstance(payload, dict):
        return ""
    runs = payload.get("rich_text") or []
    return "".join(run.get("plain_text") or "" for run in runs if isinstance(run, dict))


def blocks_to_markdown(blocks: Iterable[dict[str, Any]]) -> str:
    """Concatenate paragraph and heading blocks into markdown text."""
    parts: list[str] = []
    for block in blocks:
        if not isinstance(block, dict):
            continue
        block_type = block.get("type")
        prefix = _BLOCK_PREFIXES.get(block_type)
        if prefix is None:
            continue
        text = _block_text(block, block_type)
        if text:
            parts.append(f"{prefix}{text}")
    return "\n\n".join(parts)


def make_excerpt(text: str, limit: int = EXCERPT_LENGTH) -> str:
    """Return the first ``limit`` characters, with an ellipsis when truncated."""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def parse_iso_date(value: str | None) -> date | None:
    """Parse the date part of an ISO date or datetime string."""
    if not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def format_long_date(value: str | None) -> str:
    """Format an ISO date as ``"D Month YYYY"`` (e.g. ``"23 August 2024"``)."""
    parsed = parse_iso_date(value)
    if parsed is None:
        return value or ""
    return f"{parsed.day} {MONTH_NAMES[parsed.month - 1]} {parsed.year}"


def format_month_range(start: str | None, end: str | None) -> str:
    """Format a timeline label such as ``"Jan ~ Apr, 2023"``."""
    start_date = parse_iso_date(start)
    if start_date is None:
        return ""
    end_date = parse_iso_date(end) or start_date
    start_month = MONTH_NAMES[start_date.month - 1][:3]
    end_month = MONTH_NAMES[end_date.month - 1][:3]
    return f"{start_month} ~ {end_month}, {start_date.year}"


def year_of(value: str | None) -> str:
    parsed = parse_iso_date(value)
    return str(parsed.year) if parsed else ""
