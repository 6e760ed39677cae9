from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
import requests

from codejedi_portfolio.services.image_download import (
    ImageDownloadError,
    ImageTooLargeError,
    fetch_image_data_url,
    validate_image_url,
)


def _session_returning(
    chunks: list[bytes], headers: dict[str, str] | None = None
) -> MagicMock:
    response = MagicMock()
    response.__enter__.return_value = response
    response.headers = headers or {}
    response.iter_content.return_value = chunks
    session = MagicMock(spec=requests.Session)
    session.get.return_value = response
    return session


@pytest.mark.parametrize(
    "url", [None, "", "ftp://host/img.png", "file:///etc/passwd", "/local.png"]
)
def test_rejects_missing_or_non_http_urls(url: str | None) -> None:
    with pytest.raises(ValueError):
        validate_image_url(url)


def test_encodes_image_as_data_url() -> None:
    session = _session_returning([b"\x89P", b"NG"], {"content-type": "image/png"})

    data_url = fetch_image_data_url("https://img.example/a.png", session=session)

    assert data_url == "data:image/png;base64,iVBORw=="
    session.get.assert_called_once_with("https://img.example/a.png", timeout=10.0, stream=True)
    session.close.assert_not_called()


def test_missing_content_type_uses_octet_stream() -> None:
    session = _session_returning([b"abc"])

    assert fetch_image_data_url("http://img.example/a", session=session).startswith(
        "data:application/octet-stream;base64,"
    )


def test_fetch_failure_raises_download_error() -> None:
    session = MagicMock(spec=requests.Session)
    session.get.side_effect = requests.ConnectionError("refused")

    with pytest.raises(ImageDownloadError):
        fetch_image_data_url("https://img.example/a.png", session=session)


def test_declared_length_over_limit_is_rejected() -> None:
    session = _session_returning([b"x"], {"content-length": "2048"})

    with pytest.raises(ImageTooLargeError):
        fetch_image_data_url("https://img.example/a.png", session=session, max_bytes=1024)


def test_streamed_body_over_limit_is_rejected() -> None:
    session = _session_returning([b"x" * 600, b"x" * 600, b"x" * 600])

    with pytest.raises(ImageTooLargeError):
        fetch_image_data_url("https://img.example/a.png", session=session, max_bytes=1024)


def test_owned_session_is_closed() -> None:
    session = _session_returning([b"abc"])

    with patch(
        "codejedi_portfolio.services.image_download.requests.Session", return_value=session
    ):
        fetch_image_data_url("https://img.example/a.png")

    session.close.assert_called_once()
