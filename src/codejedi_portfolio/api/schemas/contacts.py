"""Pydantic schemas for the contact submission endpoint."""

from __future__ import annotations

from pydantic import Field

from codejedi_portfolio.api.schemas.content import CamelModel


class ContactSubmitResponse(CamelModel):
    """Body returned when a contact record was created."""

    success: bool = True
    message: str = "Contact submitted successfully!"
    record_id: str = Field(description="Id of the created Notion page")


class ErrorResponse(CamelModel):
    """Body returned when a write did not happen."""

    error: str
    details: dict[str, str] | str | None = None
