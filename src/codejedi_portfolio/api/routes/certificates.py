"""Certificate routes for the API."""

from __future__ import annotations

from fastapi import APIRouter

from codejedi_portfolio.api.dependencies import ContentServiceDep
from codejedi_portfolio.api.schemas.content import (
    CertificatesResponse,
    HuggingFaceCertificatesResponse,
)

router = APIRouter(tags=["certificates"])


@router.get("/certificates", response_model=CertificatesResponse)
def list_certificates(service: ContentServiceDep) -> CertificatesResponse:
    """List certificates, oldest first."""
    return CertificatesResponse(certificates=service.certificates())


@router.get("/hugging-face-certificates", response_model=HuggingFaceCertificatesResponse)
def list_hugging_face_certificates(
    service: ContentServiceDep,
) -> HuggingFaceCertificatesResponse:
    return HuggingFaceCertificatesResponse(
        hugging_face_certificates=service.hugging_face_certificates()
    )
