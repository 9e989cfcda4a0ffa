"""Tests for the request session middleware."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from fastapi import Request
from fastapi.testclient import TestClient
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection

from api.app import create_app
from api.dependencies import ServiceContainer
from api.middleware.session import SessionMiddleware
from shared.database import ConnectionPool, create_pool
from shared.exceptions import ResourceExhaustedError


class TestSessionMiddlewareDispatch:
    """Tests for SessionMiddleware.dispatch with a mocked pool."""

    @pytest.fixture
    def pool(self):
        pool = MagicMock()
        pool.open_session = AsyncMock(return_value=MagicMock(name="session"))
        pool.release = AsyncMock()
        return pool

    @pytest.fixture
    def mock_request(self, pool):
        request = MagicMock()
        request.app.state.container.pool = pool
        return request

    @pytest.fixture
    def middleware(self):
        return SessionMiddleware(MagicMock())

    @pytest.mark.asyncio
    async def test_binds_session_and_releases(self, middleware, mock_request, pool):
        """The session should be visible downstream and released after."""
        session = pool.open_session.return_value
        seen = []

        async def call_next(request):
            seen.append(request.state.db)
            return MagicMock(status_code=200)

        response = await middleware.dispatch(mock_request, call_next)

        assert response.status_code == 200
        assert seen == [session]
        pool.release.assert_awaited_once_with(session)

    @pytest.mark.asyncio
    async def test_releases_when_handler_raises(self, middleware, mock_request, pool):
        """A downstream error should propagate after exactly one release."""
        call_next = AsyncMock(side_effect=RuntimeError("handler failed"))

        with pytest.raises(RuntimeError, match="handler failed"):
            await middleware.dispatch(mock_request, call_next)

        pool.release.assert_awaited_once_with(pool.open_session.return_value)

    @pytest.mark.asyncio
    async def test_open_failure_stops_pipeline(self, middleware, mock_request, pool):
        """If no session can be opened, respond 500 and run nothing downstream."""
        pool.open_session.side_effect = ResourceExhaustedError(30.0)
        call_next = AsyncMock()

        response = await middleware.dispatch(mock_request, call_next)

        assert response.status_code == 500
        assert b"Internal server error" in response.body
        call_next.assert_not_called()
        pool.release.assert_not_called()

    @pytest.mark.asyncio
    async def test_exempt_path_gets_no_session(self, mock_request, pool):
        middleware = SessionMiddleware(MagicMock(), exempt_paths=("/health",))
        mock_request.url.path = "/health"
        call_next = AsyncMock(return_value=MagicMock(status_code=200))

        response = await middleware.dispatch(mock_request, call_next)

        assert response.status_code == 200
        call_next.assert_awaited_once_with(mock_request)
        pool.open_session.assert_not_called()
        pool.release.assert_not_called()


class TestSessionMiddlewareIntegration:
    """The middleware wired into the real app over SQLite."""

    def test_session_bound_during_request(self, app):
        """Handlers should see one checked-out AsyncConnection."""
        pool = app.state.container.pool

        @app.get("/_session")
        async def session_probe(request: Request):
            return {
                "is_connection": isinstance(request.state.db, AsyncConnection),
                "checked_out": pool.checked_out,
            }

        with TestClient(app) as client:
            response = client.get("/_session")

        assert response.json() == {"is_connection": True, "checked_out": 1}
        assert pool.checked_out == 0

    def test_released_when_handler_raises(self, app):
        """An unhandled handler error should still release the session."""
        pool = app.state.container.pool

        @app.get("/_boom")
        async def boom():
            raise RuntimeError("handler failed")

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/_boom")

        assert response.status_code == 500
        assert pool.checked_out == 0

    def test_every_request_releases(self, client, app):
        """Many sequential requests should leave nothing checked out."""
        for _ in range(5):
            assert client.get("/products").status_code == 200
        assert app.state.container.pool.checked_out == 0

    def test_failed_session_setting_returns_500(self, settings):
        """A rejected session setting should end the request with a 500."""
        base = create_pool(settings)
        pool = ConnectionPool(base.engine, [text("SET time_zone = '-8:00'")])
        app = create_app(container=ServiceContainer(settings, pool=pool))

        with TestClient(app) as client:
            response = client.get("/products")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error", "success": False}
        assert pool.checked_out == 0
