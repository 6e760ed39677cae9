"""Contact form submissions written to the Notion contacts database."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, TypeAdapter, ValidationError

from codejedi_portfolio.config import SiteConfig
from codejedi_portfolio.services.notion_client import NotionClient, NotionError

logger = logging.getLogger(__name__)

__all__ = [
    "ContactSubmission",
    "ContactSubmissionError",
    "ContactValidationError",
    "build_contact_page",
    "normalize_handle",
    "normalize_url",
    "submit_contact",
    "validate_submission",
]

REQUIRED_FIELDS = ("name", "email", "message")

# Optional field -> Notion property name.
HANDLE_PROPERTIES = {"instagram": "Instagram", "twitter": "Twitter", "discord": "Discord"}
URL_PROPERTIES = {"linkedin": "LinkedIn", "github": "GitHub"}

_EMAIL_ADAPTER = TypeAdapter(EmailStr)


class ContactSubmission(BaseModel):
    """Contact form payload.

    Every field is optional at parse time so that missing values surface as a
    400 with field-level details rather than a schema error. Numbers are
    accepted as text.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str | None = None
    email: str | None = None
    message: str | None = None
    phone: str | None = None
    instagram: str | None = None
    twitter: str | None = None
    discord: str | None = None
    linkedin: str | None = None
    github: str | None = None


class ContactValidationError(ValueError):
    """Raised when a submission is missing required fields or has an invalid email."""

    def __init__(self, details: dict[str, str]) -> None:
        missing = [field for field, problem in details.items() if problem == "required"]
        if missing:
            message = "Name, email, and message are required fields"
        else:
            message = "Invalid contact submission"
        super().__init__(message)
        self.details = details


class ContactSubmissionError(RuntimeError):
    """Raised when the contacts database rejects or cannot receive a submission."""


def normalize_handle(value: str | None) -> str | None:
    """Prefix a social handle with ``@`` when it lacks one."""
    value = (value or "").strip()
    if not value:
        return None
    return value if value.startswith("@") else f"@{value}"


def normalize_url(value: str | None) -> str | None:
    """Prefix a bare domain with ``https://``."""
    value = (value or "").strip()
    if not value:
        return None
    if value.startswith(("http://", "https://")):
        return value
    return f"https://{value}"


def validate_submission(submission: ContactSubmission) -> None:
    """Check required fields and the email format.

    Raises:
        ContactValidationError: With a field -> problem mapping.
    """
    details: dict[str, str] = {}
    for field in REQUIRED_FIELDS:
        if not (getattr(submission, field) or "").strip():
            details[field] = "required"

    if "email" not in details:
        try:
            _EMAIL_ADAPTER.validate_python((submission.email or "").strip())
        except ValidationError:
            details["email"] = "invalid email address"

    if details:
        raise ContactValidationError(details)


def _rich_text(content: str) -> list[dict[str, Any]]:
    return [{"type": "text", "text": {"content": content}}]


def build_contact_page(
    submission: ContactSubmission,
) -> tuple[dict[str, Any], list[dict[str, Any]]]:
    """Return the ``(properties, children)`` for a new contacts page."""
    properties: dict[str, Any] = {
        "Name": {"title": _rich_text((submission.name or "").strip())},
        "Email Address": {"email": (submission.email or "").strip()},
    }
    phone = (submission.phone or "").strip()
    if phone:
        properties["Phone Number"] = {"phone_number": phone}

    for field, prop in HANDLE_PROPERTIES.items():
        handle = normalize_handle(getattr(submission, field))
        if handle:
            properties[prop] = {"rich_text": _rich_text(handle)}

    for field, prop in URL_PROPERTIES.items():
        url = normalize_url(getattr(submission, field))
        if url:
            properties[prop] = {"url": url}

    children = [
        {
            "object": "block",
            "type": "paragraph",
            "paragraph": {"rich_text": _rich_text((submission.message or "").strip())},
        }
    ]
    return properties, children


def submit_contact(
    client: NotionClient, config: SiteConfig, submission: ContactSubmission
) -> str:
    """Validate a submission and create one contacts page for it.

    Returns:
        str: The id of the created page.

    Raises:
        ContactValidationError: If the submission is invalid.
        ContactSubmissionError: If the page could not be created.
    """
    validate_submission(submission)
    properties, children = build_contact_page(submission)

    try:
        page = client.create_page(config.database_id("contacts"), properties, children)
    except NotionError as e:
        logger.exception("Failed to submit contact for %s", submission.email)
        raise ContactSubmissionError(str(e)) from e

    record_id = page.get("id")
    if not record_id:
        raise ContactSubmissionError("Notion did not return a page id")
    logger.info("Created contact record %s", record_id)
    return record_id
