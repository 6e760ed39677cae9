"""Image download route used by the gallery's "save image" action."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from codejedi_portfolio.api.dependencies import ConfigDep
from codejedi_portfolio.api.schemas.notion import ImageDataResponse
from codejedi_portfolio.services.image_download import (
    ImageDownloadError,
    ImageTooLargeError,
    fetch_image_data_url,
)

router = APIRouter(tags=["images"])


@router.get("/downloadimage", response_model=ImageDataResponse)
def download_image(
    config: ConfigDep,
    url: Annotated[str | None, Query(description="Absolute http(s) image URL")] = None,
) -> ImageDataResponse:
    """Fetch a remote image and return it as a base64 data URL."""
    try:
        data_url = fetch_image_data_url(url, timeout=config.request_timeout)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except ImageTooLargeError as e:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=str(e)
        ) from e
    except ImageDownloadError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e
    return ImageDataResponse(image_data=data_url)
