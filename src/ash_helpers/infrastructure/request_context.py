"""
Request Context - Binds the current HTTP request for request-aware helpers

Part of the Ash Helpers library.

License: MIT
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional
import logging

from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)

_current_request: ContextVar[Optional[Request]] = ContextVar("current_request", default=None)


def get_current_request() -> Optional[Request]:
    """Return the request bound to the running context, if any."""
    return _current_request.get()


@contextmanager
def request_scope(request: Request) -> Iterator[Request]:
    """
    Bind a request for the duration of a ``with`` block.

    Args:
        request: Request to expose to request-aware helpers

    Yields:
        The bound request
    """
    token = _current_request.set(request)
    try:
        yield request
    finally:
        _current_request.reset(token)


def bind_request_context(app: FastAPI) -> FastAPI:
    """
    Register middleware that binds every incoming request.

    Args:
        app: FastAPI application

    Returns:
        The same application, for chaining
    """

    @app.middleware("http")
    async def bind_current_request(request: Request, call_next):
        """Expose the request to helpers while it is being handled."""
        with request_scope(request):
            return await call_next(request)

    logger.debug("Request context middleware registered")
    return app
