"""Per-content-type mapping from raw Notion pages to the public content model.

Each mapper composes field-resolver lookups with type-specific derivations
(slugs, excerpts, date formatting, skill grouping). A missing or malformed
field is defaulted; a page is never dropped because one property is absent.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date
from typing import Any

from codejedi_portfolio.constants.fallback_content import DEFAULT_EMOJI, PLACEHOLDER_IMAGE
from codejedi_portfolio.constants.icons import resolve_icon_name
from codejedi_portfolio.models import (
    AboutImage,
    BlogPost,
    Certificate,
    ImageAsset,
    Project,
    SkillCategory,
    TimelinePosition,
    WorkExperienceEntry,
    YearGroup,
)
from codejedi_portfolio.services.field_resolver import (
    Candidate,
    DateRange,
    PropertyShape,
    candidates,
    resolve,
    resolve_cover,
    resolve_icon,
)
from codejedi_portfolio.services.skill_grouping import group_skills
from codejedi_portfolio.services.text_utils import (
    format_long_date,
    format_month_range,
    make_excerpt,
    parse_iso_date,
    slugify,
    year_of,
)

logger = logging.getLogger(__name__)

__all__ = [
    "CONTENT_UNAVAILABLE",
    "EXCERPT_UNAVAILABLE",
    "build_skill_categories",
    "build_timeline",
    "normalize_about_image",
    "normalize_blog_post",
    "normalize_certificate",
    "normalize_image",
    "normalize_project",
    "normalize_work_experience",
    "resolve_image",
    "sort_blog_posts",
    "sort_certificates",
    "sort_work_experience",
]

CONTENT_UNAVAILABLE = "Content unavailable"
EXCERPT_UNAVAILABLE = "Content preview unavailable"

TITLE = PropertyShape.TITLE
RICH_TEXT = PropertyShape.RICH_TEXT

# ---- Candidate tables ----

WORK_TITLE = candidates(TITLE, "title", "Title", "Job Title", "Position")
WORK_COMPANY = candidates(RICH_TEXT, "company", "Company", "Company Name")
WORK_LOCATION = candidates(RICH_TEXT, "location", "Location", "Work Location")
WORK_LINK = candidates(PropertyShape.URL, "link", "Link", "Company URL", "Website")
WORK_DATES = candidates(
    PropertyShape.DATE, "Due date", "date", "Date", "Employment Period", "Tenure"
)
WORK_TENURE = candidates(PropertyShape.NUMBER, "tenure", "Tenure", "Duration", "Length")

BLOG_TITLE = candidates(TITLE, "title", "Name", "Title", "Post Title")
BLOG_PUBLISHED = [
    ("Created", PropertyShape.CREATED_TIME),
    ("Created time", PropertyShape.CREATED_TIME),
    ("Date", PropertyShape.DATE),
    ("Published", PropertyShape.DATE),
]
BLOG_TAGS = candidates(PropertyShape.MULTI_SELECT, "Tags", "Categories", "Topics")
BLOG_CATEGORY = candidates(PropertyShape.SELECT, "Category", "Type", "Section")
BLOG_FEATURED = candidates(PropertyShape.CHECKBOX, "Featured", "Highlight", "Important")
BLOG_READ_TIME = candidates(RICH_TEXT, "Read Time", "Duration")
BLOG_IMAGE = candidates(PropertyShape.FILES, "Image", "Cover", "Thumbnail")

PROJECT_TITLE = candidates(TITLE, "Name", "title", "Title", "Project Name")
PROJECT_DESCRIPTION = candidates(RICH_TEXT, "Description", "description", "Summary")
PROJECT_TAGS = candidates(
    PropertyShape.MULTI_SELECT, "Tags", "tags", "Tech", "Technologies", "Stack"
)
PROJECT_LINK = candidates(PropertyShape.URL, "Link", "link", "URL", "Demo", "Website")
PROJECT_GITHUB = candidates(
    PropertyShape.URL, "GitHub", "Github", "github", "Repository", "Repo"
)
PROJECT_FEATURED = candidates(PropertyShape.CHECKBOX, "Featured", "featured", "Highlight")
PROJECT_IMAGE = candidates(PropertyShape.FILES, "Image", "Cover", "Thumbnail")

CERT_NAME = candidates(TITLE, "title", "Name", "Title", "name")
CERT_DATE = candidates(PropertyShape.DATE, "date", "Date", "Issued", "Issue Date")
CERT_ALT = candidates(RICH_TEXT, "alt", "Alt", "Alt Text")
CERT_IMAGE = candidates(PropertyShape.FILES, "Image", "image", "Certificate", "File")
CERT_FULL_NAME = candidates(RICH_TEXT, "Full Name", "fullName")
CERT_DESCRIPTION = candidates(RICH_TEXT, "Description", "description")
CERT_SKILLS = candidates(PropertyShape.MULTI_SELECT, "Skills", "skills", "Tags")
CERT_COURSE_UNIT = [
    ("Course Unit", RICH_TEXT),
    ("Course Unit", PropertyShape.SELECT),
    ("Unit", PropertyShape.SELECT),
    ("courseUnit", RICH_TEXT),
]
CERT_FEATURED = candidates(PropertyShape.CHECKBOX, "Featured", "featured")

IMAGE_NAME = candidates(TITLE, "Name", "title", "Title")
IMAGE_TYPE = candidates(PropertyShape.SELECT, "Type", "Category", "Kind")
IMAGE_FILES = candidates(PropertyShape.FILES, "Files", "Image", "File")

ABOUT_ID = candidates(TITLE, "id", "userDefined:id", "Name", "Title")
ABOUT_ALT = candidates(RICH_TEXT, "alt", "Alt", "Alt Text")
ABOUT_SRC = [
    ("src", RICH_TEXT),
    ("Src", RICH_TEXT),
    ("URL", RICH_TEXT),
    ("url", RICH_TEXT),
    ("URL", PropertyShape.URL),
    ("url", PropertyShape.URL),
]

SKILL_NAME = candidates(TITLE, "Name", "name")
SKILL_CATEGORY = candidates(PropertyShape.SELECT, "category", "Category")
SKILL_ICON = candidates(RICH_TEXT, "icon", "Icon")
SKILL_DISPLAY = candidates(PropertyShape.CHECKBOX, "display", "Display", "Show")

# Date-like properties used to sort the images database, in preference order.
IMAGE_SORT_PROPERTIES = (
    "Created",
    "Created time",
    "Date created",
    "Created at",
    "Date",
    "Last edited time",
)


def _page_id(page: dict[str, Any]) -> str:
    return str(page.get("id") or "")


def resolve_image(
    page: dict[str, Any],
    property_candidates: list[Candidate],
    placeholder: str | None = PLACEHOLDER_IMAGE,
) -> str | None:
    """Resolve an image URL: page cover, then file property, then placeholder."""
    return resolve_cover(page) or resolve(page, property_candidates) or placeholder


# ---- Work experience ----


def normalize_work_experience(page: dict[str, Any]) -> WorkExperienceEntry:
    """Map a work-history page; ``end_date`` defaults to ``start_date``."""
    dates: DateRange | None = resolve(page, WORK_DATES)
    start_date = dates.start if dates else ""
    end_date = (dates.end or dates.start) if dates else ""
    icon, icon_type = resolve_icon(page)

    return WorkExperienceEntry(
        id=_page_id(page),
        title=resolve(page, WORK_TITLE, ""),
        company=resolve(page, WORK_COMPANY, ""),
        location=resolve(page, WORK_LOCATION, ""),
        start_date=start_date,
        end_date=end_date,
        tenure_days=resolve(page, WORK_TENURE, 0),
        link=resolve(page, WORK_LINK, ""),
        year=year_of(start_date),
        date_range=format_month_range(start_date, end_date),
        emoji=icon or DEFAULT_EMOJI,
        icon=icon,
        icon_type=icon_type,
    )


def sort_work_experience(entries: Iterable[WorkExperienceEntry]) -> list[WorkExperienceEntry]:
    """Most recent first; entries without a start date go last."""
    return sorted(entries, key=lambda entry: entry.start_date or "", reverse=True)


def _year_sort_key(year: str) -> int:
    return int(year) if year.isdigit() else -1


def build_timeline(entries: Iterable[WorkExperienceEntry]) -> list[YearGroup]:
    """Group work experience by year, newest year first.

    Odd years sit on the left of the timeline and even years on the right.
    """
    grouped: dict[str, list[TimelinePosition]] = {}
    for entry in entries:
        year = entry.year or year_of(entry.start_date)
        grouped.setdefault(year, []).append(
            TimelinePosition(
                emoji=entry.emoji,
                title=entry.title,
                company=entry.company,
                location=entry.location,
                date=entry.date_range or format_month_range(entry.start_date, entry.end_date),
                link=entry.link,
                is_left=year.isdigit() and int(year) % 2 == 1,
            )
        )
    return [
        YearGroup(year=year, positions=positions)
        for year, positions in sorted(
            grouped.items(), key=lambda item: _year_sort_key(item[0]), reverse=True
        )
    ]


# ---- Blog ----


def _published_at(page: dict[str, Any]) -> str:
    value = resolve(page, BLOG_PUBLISHED)
    if isinstance(value, DateRange):
        return value.start
    return value or page.get("created_time") or ""


def normalize_blog_post(page: dict[str, Any], body: str | None, author: str) -> BlogPost:
    """Map a blog page. ``body`` is the page's markdown, or None if it could not be read."""
    title = resolve(page, BLOG_TITLE, "Untitled Post")
    icon, icon_type = resolve_icon(page)

    if body is None:
        content = CONTENT_UNAVAILABLE
        excerpt = EXCERPT_UNAVAILABLE
    else:
        content = body
        excerpt = make_excerpt(body)

    return BlogPost(
        id=_page_id(page),
        title=title,
        slug=slugify(title),
        excerpt=excerpt,
        content=content,
        author=author,
        published_at=_published_at(page),
        updated_at=page.get("last_edited_time"),
        tags=resolve(page, BLOG_TAGS, []),
        featured=resolve(page, BLOG_FEATURED, False),
        read_time=resolve(page, BLOG_READ_TIME, "5 min read"),
        image=resolve_image(page, BLOG_IMAGE),
        category=resolve(page, BLOG_CATEGORY, "General"),
        icon=icon,
        icon_type=icon_type,
        notion_url=page.get("url"),
    )


def sort_blog_posts(posts: Iterable[BlogPost]) -> list[BlogPost]:
    return sorted(posts, key=lambda post: post.published_at or "", reverse=True)


# ---- Projects ----


def normalize_project(page: dict[str, Any], body: str | None) -> Project:
    """Map a project page; the long description falls back to the short one."""
    description = resolve(page, PROJECT_DESCRIPTION, "")
    icon, icon_type = resolve_icon(page)
    return Project(
        id=_page_id(page),
        title=resolve(page, PROJECT_TITLE, "Untitled Project"),
        description=description,
        long_description=body or description,
        image=resolve_image(page, PROJECT_IMAGE),
        tags=resolve(page, PROJECT_TAGS, []),
        link=resolve(page, PROJECT_LINK, ""),
        github=resolve(page, PROJECT_GITHUB, ""),
        featured=resolve(page, PROJECT_FEATURED, False),
        icon=icon,
        icon_type=icon_type,
    )


# ---- Certificates ----


def normalize_certificate(page: dict[str, Any]) -> Certificate:
    """Map a certificate page, defaulting (and logging) any missing field."""
    name = resolve(page, CERT_NAME)
    dates: DateRange | None = resolve(page, CERT_DATE)
    image = resolve_image(page, CERT_IMAGE, placeholder=None)

    missing = [
        field
        for field, value in (("name", name), ("date", dates), ("image", image))
        if not value
    ]
    if missing:
        logger.warning(
            "Certificate %s is missing %s; using defaults", _page_id(page), ", ".join(missing)
        )

    name = name or "Untitled"
    start = dates.start if dates else None
    return Certificate(
        id=_page_id(page),
        name=name,
        image=image or PLACEHOLDER_IMAGE,
        alt=resolve(page, CERT_ALT, name),
        date=format_long_date(start),
        full_name=resolve(page, CERT_FULL_NAME),
        description=resolve(page, CERT_DESCRIPTION),
        skills=resolve(page, CERT_SKILLS),
        course_unit=resolve(page, CERT_COURSE_UNIT),
        featured=resolve(page, CERT_FEATURED),
        issued_on=parse_iso_date(start),
    )


def sort_certificates(certificates: Iterable[Certificate]) -> list[Certificate]:
    """Oldest first; undated certificates go last."""
    return sorted(
        certificates,
        key=lambda cert: (cert.issued_on is None, cert.issued_on or date.min),
    )


# ---- Images ----


def normalize_image(page: dict[str, Any]) -> ImageAsset:
    icon, icon_type = resolve_icon(page)
    return ImageAsset(
        id=_page_id(page),
        name=resolve(page, IMAGE_NAME, "Untitled Image"),
        type=resolve(page, IMAGE_TYPE, "Unknown"),
        image_url=resolve_image(page, IMAGE_FILES, placeholder=None),
        created_time=page.get("created_time"),
        last_edited_time=page.get("last_edited_time"),
        url=page.get("url"),
        icon=icon,
        icon_type=icon_type,
    )


def normalize_about_image(page: dict[str, Any]) -> AboutImage:
    """Map an "about me" photo; its id is the page's title text."""
    return AboutImage(
        id=resolve(page, ABOUT_ID) or _page_id(page),
        src=resolve_image(page, ABOUT_SRC, placeholder=""),
        alt=resolve(page, ABOUT_ALT, ""),
    )


# ---- Skills ----


def build_skill_categories(pages: Iterable[dict[str, Any]]) -> list[SkillCategory]:
    """Group displayable skill pages into categories, in first-seen order.

    Pages without a category, or whose display flag is false, are left out.
    A page with no display property at all is shown.
    """
    names_by_category: dict[str, list[str]] = {}
    icons: dict[str, str] = {}

    for page in pages:
        if not resolve(page, SKILL_DISPLAY, True):
            continue
        category = resolve(page, SKILL_CATEGORY)
        if not category:
            continue
        if category not in names_by_category:
            names_by_category[category] = []
            icons[category] = resolve_icon_name(resolve(page, SKILL_ICON))
        names_by_category[category].append(resolve(page, SKILL_NAME, "Untitled Skill"))

    return [
        SkillCategory(
            id=slugify(category),
            title=category,
            icon=icons[category],
            skills=group_skills(category, names),
        )
        for category, names in names_by_category.items()
    ]
