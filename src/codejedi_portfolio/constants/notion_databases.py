"""Notion database identifiers used by the portfolio content collections.

Each identifier can be overridden through the environment (see ``config.py``);
the values below are the databases the public site reads from.
"""

from __future__ import annotations

NOTION_API_URL = "https://api.notion.com/v1"
NOTION_VERSION = "2022-06-28"

DEFAULT_DATABASE_IDS: dict[str, str] = {
    "work_experience": "ce4d8010-744e-4fc7-90d5-f1ca4e481955",
    "blogs": "311b3a0811614102b265b91425edf4df",
    "side_projects": "8845d571-4240-4f4d-9e67-e54f552c4e2e",
    "images": "911ef9d8-89c2-41ad-bf82-a2a9cc41e231",
    "about_images": "c8c11443-ac59-4f07-899a-1c0604751414",
    "skills": "93762143-ef43-4c4b-be97-cb7e7d2dd2f4",
    "contacts": "46fdbe9f-11ca-4f7e-9123-8f2e9025c66d",
    "certificates": "",
    "hugging_face_certificates": "",
}

# Environment variable consulted for each collection's database id.
DATABASE_ID_ENV_VARS: dict[str, str] = {
    "work_experience": "WORK_EXPERIENCE_DATABASE_ID",
    "blogs": "BLOGS_DATABASE_ID",
    "side_projects": "SIDE_PROJECTS_DATABASE_ID",
    "images": "IMAGES_DATABASE_ID",
    "about_images": "ABOUT_IMAGES_DATABASE_ID",
    "skills": "SKILLS_DATABASE_ID",
    "contacts": "CONTACTS_DATABASE_ID",
    "certificates": "CERTIFICATES_DATABASE_ID",
    "hugging_face_certificates": "HUGGING_FACE_CERTIFICATES_DATABASE_ID",
}

# Public names accepted by the /api/notion pass-through, mapped to collections.
PROXY_DATABASE_NAMES: dict[str, str] = {
    "work-experience": "work_experience",
    "blogs": "blogs",
    "side-project-technical": "side_projects",
    "images": "images",
}

DEFAULT_ALLOWED_ORIGINS: tuple[str, ...] = (
    "http://localhost:3000",
    "http://localhost:3001",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:3001",
    "https://bolt-codejedi.ai.github.io",
    "https://codejedi-ai.github.io",
    "https://codejedi.ai",
    "https://www.codejedi.ai",
)
