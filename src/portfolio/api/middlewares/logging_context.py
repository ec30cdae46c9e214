"""Logging context middleware for request correlation."""

from asgi_correlation_id import correlation_id
from fastapi import Request, Response
from starlette.middleware.base import RequestResponseEndpoint

from src.portfolio.core.logging import (
    bind_content_source,
    bind_request_context,
    clear_request_context,
)


async def logging_context_middleware(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    """Bind request_id and the active content source to log context."""
    clear_request_context()
    bind_request_context(correlation_id.get())
    repository = getattr(request.app.state, "content_repository", None)
    if repository is not None:
        bind_content_source(repository.source)
    try:
        return await call_next(request)
    finally:
        clear_request_context()
