"""Route handlers for the API."""

from codejedi_portfolio.api.routes import (
    admin,
    blog,
    certificates,
    contacts,
    download_image,
    health,
    images,
    notion_proxy,
    projects,
    skills,
    work_experience,
)

__all__ = [
    "health",
    "work_experience",
    "blog",
    "projects",
    "certificates",
    "images",
    "skills",
    "contacts",
    "notion_proxy",
    "download_image",
    "admin",
]
