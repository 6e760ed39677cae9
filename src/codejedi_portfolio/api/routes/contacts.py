"""Contact routes for the API."""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from codejedi_portfolio.api.dependencies import ConfigDep, ContentServiceDep, NotionClientDep
from codejedi_portfolio.api.schemas.contacts import ContactSubmitResponse, ErrorResponse
from codejedi_portfolio.api.schemas.content import ContactsResponse
from codejedi_portfolio.services.contact_submission import (
    ContactSubmission,
    ContactSubmissionError,
    ContactValidationError,
    submit_contact,
)

router = APIRouter(prefix="/contacts", tags=["contacts"])


@router.get("", response_model=ContactsResponse)
def list_contacts(service: ContentServiceDep) -> ContactsResponse:
    """List the static contact channels."""
    return ContactsResponse(contacts=service.contacts())


@router.post(
    "/submit",
    response_model=ContactSubmitResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
def submit_contact_endpoint(
    data: ContactSubmission,
    config: ConfigDep,
    client: NotionClientDep,
) -> ContactSubmitResponse | JSONResponse:
    """Record a contact form submission in the contacts database."""
    try:
        record_id = submit_contact(client, config, data)
    except ContactValidationError as e:
        body = ErrorResponse(error=str(e), details=e.details)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())
    except ContactSubmissionError as e:
        body = ErrorResponse(
            error="Failed to submit contact. Please try again later.", details=str(e)
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body.model_dump()
        )

    return ContactSubmitResponse(record_id=record_id)
