"""Fallback-based property extraction for Notion pages.

Property names in the content databases are not stable across deployments
(the same logical field has been called "Title", "title", "Name" and
"Job Title"). Callers pass an ordered list of ``(property name, shape)``
candidates and receive the first present value, or their default.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

__all__ = [
    "Candidate",
    "DateRange",
    "PropertyShape",
    "candidates",
    "present_property_names",
    "resolve",
    "resolve_cover",
    "resolve_icon",
]


class PropertyShape(StrEnum):
    """Notion property types the resolver knows how to read."""

    TITLE = "title"
    RICH_TEXT = "rich_text"
    SELECT = "select"
    MULTI_SELECT = "multi_select"
    CHECKBOX = "checkbox"
    URL = "url"
    DATE = "date"
    FILES = "files"
    NUMBER = "number"
    CREATED_TIME = "created_time"
    EMAIL = "email"
    PHONE_NUMBER = "phone_number"


@dataclass(frozen=True, slots=True)
class DateRange:
    """Start/end pair of a Notion date property (ISO strings)."""

    start: str
    end: str | None = None


Candidate = tuple[str, PropertyShape]


def candidates(shape: PropertyShape, *names: str) -> list[Candidate]:
    """Build a candidate list where every name shares one shape."""
    return [(name, shape) for name in names]


def _join_runs(value: Any) -> str | None:
    if not isinstance(value, list):
        return None
    parts = [run.get("plain_text") or "" for run in value if isinstance(run, dict)]
    return "".join(parts)


def _select_name(value: Any) -> str | None:
    if isinstance(value, dict):
        return value.get("name")
    return None


def _multi_select_names(value: Any) -> list[str] | None:
    if not isinstance(value, list):
        return None
    return [item["name"] for item in value if isinstance(item, dict) and item.get("name")]


def _checkbox(value: Any) -> bool | None:
    return value if isinstance(value, bool) else None


def _string(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _number(value: Any) -> int | float | None:
    if isinstance(value, bool):
        return None
    return value if isinstance(value, int | float) else None


def _date(value: Any) -> DateRange | None:
    if not isinstance(value, dict) or not value.get("start"):
        return None
    return DateRange(start=value["start"], end=value.get("end"))


def _file_url(entry: Any) -> str | None:
    if not isinstance(entry, dict):
        return None
    for kind in ("file", "external"):
        hosted = entry.get(kind)
        if isinstance(hosted, dict) and hosted.get("url"):
            return hosted["url"]
    return None


def _first_file(value: Any) -> str | None:
    if not isinstance(value, list):
        return None
    for entry in value:
        url = _file_url(entry)
        if url:
            return url
    return None


_EXTRACTORS: dict[PropertyShape, Callable[[Any], Any]] = {
    PropertyShape.TITLE: _join_runs,
    PropertyShape.RICH_TEXT: _join_runs,
    PropertyShape.SELECT: _select_name,
    PropertyShape.MULTI_SELECT: _multi_select_names,
    PropertyShape.CHECKBOX: _checkbox,
    PropertyShape.URL: _string,
    PropertyShape.DATE: _date,
    PropertyShape.FILES: _first_file,
    PropertyShape.NUMBER: _number,
    PropertyShape.CREATED_TIME: _string,
    PropertyShape.EMAIL: _string,
    PropertyShape.PHONE_NUMBER: _string,
}


def _is_present(value: Any) -> bool:
    return value is not None and value != "" and value != []


def _properties(record: Any) -> dict[str, Any]:
    if not isinstance(record, dict):
        return {}
    props = record.get("properties")
    return props if isinstance(props, dict) else {}


def resolve(record: Any, candidate_list: Iterable[Candidate], default: Any = None) -> Any:
    """Return the first candidate value present on ``record``.

    A candidate matches when the property exists, carries the payload for its
    shape, and the extracted value is non-empty. ``False`` counts as a present
    checkbox value. Missing or malformed data never raises.
    """
    props = _properties(record)
    for name, shape in candidate_list:
        prop = props.get(name)
        if not isinstance(prop, dict) or shape.value not in prop:
            continue
        declared = prop.get("type")
        if declared is not None and declared != shape.value:
            continue
        value = _EXTRACTORS[shape](prop[shape.value])
        if _is_present(value):
            return value
    return default


def resolve_cover(record: Any) -> str | None:
    """Return the page-level cover image URL, if any."""
    if not isinstance(record, dict):
        return None
    return _file_url(record.get("cover"))


def resolve_icon(record: Any) -> tuple[str | None, str | None]:
    """Return ``(icon, icon_type)`` for a page icon: an emoji or an image URL."""
    icon = record.get("icon") if isinstance(record, dict) else None
    if not isinstance(icon, dict):
        return None, None
    value = icon.get("emoji") or _file_url(icon)
    return value, icon.get("type")


def present_property_names(record: Any, names: Sequence[str]) -> list[str]:
    """Return which of ``names`` exist on the record, in the given order."""
    props = _properties(record)
    return [name for name in names if name in props]
