"""Content errors and exception handlers with request_id in responses."""

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.portfolio.core.logging import get_logger

logger = get_logger(__name__)


class ContentError(Exception):
    """Base class for content layer failures."""


class ConfigurationError(ContentError):
    """The data layer is not fully configured (e.g. database mode without a URL)."""


class ContentSourceUnavailableError(ContentError):
    """The selected content source could not be reached."""


class ContentCollectionError(ContentError):
    """The static content collection is missing or invalid."""


class SeedError(ContentError):
    """A seed run was aborted."""


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.detail,
                "request_id": correlation_id.get(),
            },
        )

    @app.exception_handler(ContentSourceUnavailableError)
    async def content_unavailable_handler(
        request: Request, exc: ContentSourceUnavailableError
    ) -> JSONResponse:
        request_id = correlation_id.get()
        logger.error(
            "Content source unavailable",
            error=str(exc),
            request_id=request_id,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "detail": "Content source unavailable",
                "request_id": request_id,
            },
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = correlation_id.get()
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=request_id,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error",
                "request_id": request_id,
            },
        )
