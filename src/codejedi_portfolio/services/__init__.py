"""Services"""

from codejedi_portfolio.services.contact_submission import (
    ContactSubmission,
    ContactSubmissionError,
    ContactValidationError,
    submit_contact,
)
from codejedi_portfolio.services.content import ContentService, UnknownDatabaseError
from codejedi_portfolio.services.image_download import (
    ImageDownloadError,
    ImageTooLargeError,
    fetch_image_data_url,
)
from codejedi_portfolio.services.notion_client import NotionClient, NotionError
from codejedi_portfolio.services.response_cache import ResponseCache

__all__ = [
    "ContentService",
    "UnknownDatabaseError",
    "NotionClient",
    "NotionError",
    "ResponseCache",
    "ContactSubmission",
    "ContactSubmissionError",
    "ContactValidationError",
    "submit_contact",
    "ImageDownloadError",
    "ImageTooLargeError",
    "fetch_image_data_url",
]
