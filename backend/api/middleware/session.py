"""
Request-scoped database session middleware.

Opens one pooled session per request, binds it to request.state.db for
the handlers, and releases it on every exit path.
"""

import logging
from typing import Iterable

from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

from shared.exceptions import CatalogError

logger = logging.getLogger(__name__)


class SessionMiddleware(BaseHTTPMiddleware):
    """
    Brackets the downstream pipeline with a pooled session.

    If the session cannot be opened (pool exhausted, connection error, or
    a session setting rejected) the request ends with a 500 and nothing
    downstream runs. Errors raised downstream propagate after the session
    has been released.

    Requests to exempt_paths pass through without a session; those
    handlers open their own.

    Example:
        app.add_middleware(SessionMiddleware, exempt_paths=("/health",))
    """

    def __init__(self, app: ASGIApp, exempt_paths: Iterable[str] = ()) -> None:
        super().__init__(app)
        self._exempt_paths = frozenset(exempt_paths)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path in self._exempt_paths:
            return await call_next(request)

        pool = request.app.state.container.pool

        try:
            db = await pool.open_session()
        except (CatalogError, SQLAlchemyError, OSError):
            logger.exception("Failed to open database session")
            return JSONResponse(
                status_code=500,
                content={"error": "Internal server error", "success": False},
            )

        request.state.db = db
        try:
            return await call_next(request)
        finally:
            request.state.db = None
            await pool.release(db)
