"""Normalized content records served by the content endpoints.

Field names are snake_case in Python and camelCase on the wire; every record
is immutable once built.
"""

from __future__ import annotations

import datetime as dt
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ContentModel(BaseModel):
    """Base for public content records."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_public(self) -> dict[str, Any]:
        """Return the JSON-ready, camelCase representation."""
        return self.model_dump(mode="json", by_alias=True)


class WorkExperienceEntry(ContentModel):
    id: str
    title: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    tenure_days: float = 0
    link: str = ""
    year: str = ""
    date_range: str = ""
    emoji: str | None = None
    icon: str | None = None
    icon_type: str | None = None


class TimelinePosition(ContentModel):
    emoji: str | None = None
    title: str
    company: str
    location: str
    date: str
    link: str
    is_left: bool


class YearGroup(ContentModel):
    year: str
    positions: list[TimelinePosition] = Field(default_factory=list)


class BlogPost(ContentModel):
    id: str
    title: str
    slug: str
    excerpt: str = ""
    content: str = ""
    author: str = ""
    published_at: str = ""
    updated_at: str | None = None
    tags: list[str] = Field(default_factory=list)
    featured: bool = False
    read_time: str = "5 min read"
    image: str = ""
    category: str = "General"
    icon: str | None = None
    icon_type: str | None = None
    notion_url: str | None = None


class Project(ContentModel):
    id: str
    title: str
    description: str = ""
    long_description: str = ""
    image: str = ""
    tags: list[str] = Field(default_factory=list)
    link: str = ""
    github: str = ""
    featured: bool = False
    icon: str | None = None
    icon_type: str | None = None


class Certificate(ContentModel):
    id: str
    name: str
    image: str = ""
    alt: str = ""
    date: str = ""
    full_name: str | None = None
    description: str | None = None
    skills: list[str] | None = None
    course_unit: str | None = None
    featured: bool | None = None
    # Used for chronological ordering; not part of the public payload.
    issued_on: dt.date | None = Field(default=None, exclude=True)


class ImageAsset(ContentModel):
    id: str
    name: str
    type: str = "Unknown"
    image_url: str | None = None
    created_time: str | None = None
    last_edited_time: str | None = None
    url: str | None = None
    icon: str | None = None
    icon_type: str | None = None


class AboutImage(ContentModel):
    id: str
    src: str = ""
    alt: str = ""


class SkillCategory(ContentModel):
    id: str
    title: str
    icon: str
    skills: list[str] = Field(default_factory=list)


class ContactChannel(ContentModel):
    id: str
    name: str
    value: str
    icon: str
    href: str
    color: str
    qr: bool = False
