"""FastAPI application entry point for the portfolio content API."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from codejedi_portfolio.api.cors import install_cors
from codejedi_portfolio.api.dependencies import get_config
from codejedi_portfolio.api.routes import (
    admin,
    blog,
    certificates,
    contacts,
    download_image,
    health,
    images,
    notion_proxy,
    projects,
    skills,
    work_experience,
)
from codejedi_portfolio.api.schemas.contacts import ErrorResponse

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log the effective configuration on startup and release storage on shutdown."""
    from codejedi_portfolio.data.db import dispose_engine

    config = app.dependency_overrides.get(get_config, get_config)()
    if not config.has_notion_secret:
        logger.warning("NOTION_INTEGRATION_SECRET is not set; serving fallback content")
    logger.info(
        "Starting portfolio API (environment=%s, cache=%s)",
        config.environment,
        "disabled" if config.cache_disabled else "enabled",
    )
    yield
    dispose_engine()


app = FastAPI(
    title="CodeJedi Portfolio API",
    description="Portfolio content sourced from Notion, normalized and cached",
    version="0.1.0",
    lifespan=lifespan,
)

install_cors(app, get_config)

CONTACT_SUBMIT_PATH = "/api/contacts/submit"


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed contact submissions with the same 400 body as missing fields."""
    if request.url.path != CONTACT_SUBMIT_PATH:
        return await request_validation_exception_handler(request, exc)
    details = {
        ".".join(str(part) for part in error["loc"][1:]) or "body": error["msg"]
        for error in exc.errors()
    }
    body = ErrorResponse(error="Invalid contact submission", details=details)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


app.include_router(health.router)
app.include_router(work_experience.router, prefix="/api")
app.include_router(blog.router, prefix="/api")
app.include_router(projects.router, prefix="/api")
app.include_router(certificates.router, prefix="/api")
app.include_router(images.router, prefix="/api")
app.include_router(skills.router, prefix="/api")
app.include_router(contacts.router, prefix="/api")
app.include_router(notion_proxy.router, prefix="/api")
app.include_router(download_image.router, prefix="/api")
app.include_router(admin.router, prefix="/api")


def main() -> None:
    """Start the development server."""
    import uvicorn

    uvicorn.run(
        "codejedi_portfolio.api.main:app",
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", "8000")),
        reload=os.environ.get("APP_ENV", "").lower() == "development",
    )


if __name__ == "__main__":
    main()
