"""Image gallery routes for the API."""

from __future__ import annotations

from fastapi import APIRouter

from codejedi_portfolio.api.dependencies import ContentServiceDep
from codejedi_portfolio.api.schemas.content import AboutImagesResponse, ImagesResponse

router = APIRouter(tags=["images"])


@router.get("/images", response_model=ImagesResponse)
def list_images(service: ContentServiceDep) -> ImagesResponse:
    return ImagesResponse(images=service.images())


@router.get("/about-images", response_model=AboutImagesResponse)
def list_about_images(service: ContentServiceDep) -> AboutImagesResponse:
    """List the "about me" photos in upload order."""
    return AboutImagesResponse(about_images=service.about_images())
