"""Fetch a remote image and return it as a base64 data URL."""

from __future__ import annotations

import base64
import logging
from urllib.parse import urlparse

import requests

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"
MAX_IMAGE_BYTES = 10 * 1024 * 1024
_CHUNK_SIZE = 64 * 1024


class ImageDownloadError(RuntimeError):
    """Raised when the remote image cannot be fetched."""


class ImageTooLargeError(ImageDownloadError):
    """Raised when the remote image exceeds the download size limit."""


def validate_image_url(url: str | None) -> str:
    """Return ``url`` if it is an absolute http(s) URL.

    Raises:
        ValueError: If the URL is missing or uses another scheme.
    """
    if not url:
        raise ValueError("No URL provided")
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("Only http and https image URLs are supported")
    return url


def _read_limited(response: requests.Response, max_bytes: int) -> bytes:
    declared = response.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > max_bytes:
        raise ImageTooLargeError(f"Image is larger than {max_bytes} bytes")

    content = bytearray()
    for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
        content.extend(chunk)
        if len(content) > max_bytes:
            raise ImageTooLargeError(f"Image is larger than {max_bytes} bytes")
    return bytes(content)


def fetch_image_data_url(
    url: str | None,
    *,
    session: requests.Session | None = None,
    timeout: float = 10.0,
    max_bytes: int = MAX_IMAGE_BYTES,
) -> str:
    """Download an image and encode it as ``data:<mime>;base64,<payload>``.

    The body is streamed and abandoned once it passes ``max_bytes``.

    Raises:
        ValueError: If the URL is missing or not http(s).
        ImageTooLargeError: If the image exceeds ``max_bytes``.
        ImageDownloadError: If the image cannot be fetched.
    """
    url = validate_image_url(url)
    http = session or requests.Session()
    try:
        with http.get(url, timeout=timeout, stream=True) as response:
            response.raise_for_status()
            mime_type = response.headers.get("content-type") or DEFAULT_MIME_TYPE
            content = _read_limited(response, max_bytes)
    except requests.RequestException as e:
        logger.warning("Failed to fetch image %s: %s", url, e)
        raise ImageDownloadError(f"Failed to fetch image: {e}") from e
    finally:
        if session is None:
            http.close()

    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"
