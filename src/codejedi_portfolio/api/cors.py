"""CORS policy for the ``/api`` routes.

The policy echoes an allowed origin back (with credentials) and otherwise
answers ``*`` so that static deployments on unlisted hosts keep working.
Preflight ``OPTIONS`` requests are answered directly with status 200.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response

from codejedi_portfolio.config import SiteConfig

ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS, PATCH, HEAD"
ALLOW_HEADERS = (
    "Content-Type, Authorization, X-Requested-With, Accept, Origin, X-HTTP-Method-Override"
)
MAX_AGE = "86400"
EXPOSE_HEADERS = "Content-Length, Content-Type"

API_PREFIX = "/api"


def cors_headers(config: SiteConfig, origin: str | None) -> dict[str, str]:
    """Return the CORS headers for a request from ``origin``."""
    headers = {
        "Access-Control-Allow-Methods": ALLOW_METHODS,
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
        "Access-Control-Max-Age": MAX_AGE,
        "Access-Control-Expose-Headers": EXPOSE_HEADERS,
    }
    if (
        not config.allow_all_origins
        and not config.is_development
        and origin
        and origin in config.allowed_origins
    ):
        headers["Access-Control-Allow-Origin"] = origin
        headers["Vary"] = "Origin"
        headers["Access-Control-Allow-Credentials"] = "true"
    else:
        headers["Access-Control-Allow-Origin"] = "*"
    return headers


def install_cors(app: FastAPI, config_provider: Callable[[], SiteConfig]) -> None:
    """Register the CORS middleware on ``app``.

    ``config_provider`` is called per request, which lets tests swap the
    configuration through ``app.dependency_overrides``.
    """

    @app.middleware("http")
    async def apply_cors(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if not request.url.path.startswith(API_PREFIX):
            return await call_next(request)

        provider = app.dependency_overrides.get(config_provider, config_provider)
        headers = cors_headers(provider(), request.headers.get("origin"))

        if request.method == "OPTIONS":
            return Response(status_code=200, headers=headers)

        response = await call_next(request)
        response.headers.update(headers)
        return response
