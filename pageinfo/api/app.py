"""FastAPI application factory.

Routers
-------
    /api/v1   - page analysis
    /health   - liveness probe

Every error response has the shape ``{"error": "<message>"}``.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pageinfo import __version__
from pageinfo.api.routers import info as info_router
from pageinfo.config import configure_logging, settings


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    configure_logging()

    app = FastAPI(
        title="PageInfo API",
        description=(
            "Fetches a web page and reports its HTML version, title, heading "
            "distribution, internal/external link counts, how many links are "
            "unreachable, and whether it contains a login form."
        ),
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)

    app.include_router(info_router.router, prefix="/api/v1", tags=["info"])

    @app.get("/health", tags=["health"])
    def health() -> dict:
        return {"status": "ok"}

    return app


# Module-level instance used by uvicorn:
#   uvicorn pageinfo.api.app:app --reload
app = create_app()
