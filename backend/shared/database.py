"""
Connection pool for the relational store.

Wraps an SQLAlchemy AsyncEngine and hands out one AsyncConnection per
request. Each checkout gets the fixed session settings applied before any
caller sees it, and every checkout is released exactly once.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional, Sequence

from sqlalchemy import exc as sa_exc
from sqlalchemy import text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.sql.elements import TextClause

from .config import Settings
from .exceptions import ResourceExhaustedError, SessionReleaseError

logger = logging.getLogger(__name__)


class ConnectionPool:
    """
    Bounded pool of database sessions.

    The engine's queue pool does the actual bookkeeping; this class adds the
    per-session settings, the exhaustion error and the release guard.

    Example:
        async with pool.session() as db:
            await db.execute(text("SELECT 1"))
    """

    def __init__(
        self,
        engine: AsyncEngine,
        session_settings: Sequence[TextClause] = (),
        timeout: float = 30.0,
    ) -> None:
        """
        Args:
            engine: Async engine whose pool is shared by all requests.
            session_settings: Statements executed on every checkout, in order.
            timeout: Checkout timeout reported in ResourceExhaustedError.
        """
        self._engine = engine
        self._session_settings = tuple(session_settings)
        self._timeout = timeout
        self._checked_out: set[int] = set()

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def checked_out(self) -> int:
        """Number of sessions currently handed out."""
        return len(self._checked_out)

    async def acquire(self) -> AsyncConnection:
        """
        Check a connection out of the pool.

        Suspends until one is free or the pool timeout elapses.

        Raises:
            ResourceExhaustedError: If no connection became free in time
        """
        try:
            conn = await self._engine.connect()
        except sa_exc.TimeoutError as e:
            raise ResourceExhaustedError(self._timeout) from e
        self._checked_out.add(id(conn))
        return conn

    async def release(self, conn: AsyncConnection) -> None:
        """
        Return a connection to the pool.

        Uncommitted work is rolled back by the close.

        Raises:
            SessionReleaseError: If the connection is not checked out
        """
        if id(conn) not in self._checked_out:
            raise SessionReleaseError()
        self._checked_out.discard(id(conn))
        await conn.close()

    async def apply_session_settings(self, conn: AsyncConnection) -> None:
        for statement in self._session_settings:
            await conn.execute(statement)

    async def open_session(self) -> AsyncConnection:
        """
        Acquire a connection and apply the session settings.

        If the settings fail the connection is released before the error
        propagates, so callers only ever see a fully prepared session.
        """
        conn = await self.acquire()
        try:
            await self.apply_session_settings(conn)
        except BaseException:
            await self.release(conn)
            raise
        return conn

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncConnection]:
        """Bracket one unit of work with open_session() and release()."""
        conn = await self.open_session()
        try:
            yield conn
        finally:
            await self.release(conn)

    async def dispose(self) -> None:
        await self._engine.dispose()


def build_database_url(settings: Settings) -> URL:
    """DATABASE_URL when set, otherwise a MySQL URL from the DB_* fields."""
    if settings.database_url:
        return make_url(settings.database_url)
    return URL.create(
        "mysql+aiomysql",
        username=settings.db_user,
        password=settings.db_password or None,
        host=settings.db_host,
        port=settings.db_port,
        database=settings.db_name,
    )


def session_statements(settings: Settings, dialect: str) -> list[TextClause]:
    """
    Statements applied to every session checkout.

    MySQL sessions run in strict (TRADITIONAL) mode with a fixed time zone
    offset. Other dialects have no equivalent and get nothing.
    """
    if dialect != "mysql":
        return []
    return [
        text("SET SESSION sql_mode = :sql_mode").bindparams(sql_mode=settings.db_sql_mode),
        text("SET time_zone = :time_zone").bindparams(time_zone=settings.db_time_zone),
    ]


def create_pool(
    settings: Settings,
    session_settings: Optional[Sequence[TextClause]] = None,
) -> ConnectionPool:
    """
    Create the process-wide connection pool.

    The engine connects lazily, so this does no I/O.

    Args:
        settings: Application settings
        session_settings: Override for the per-checkout statements

    Returns:
        ConnectionPool bounded at DB_POOL_SIZE with no overflow
    """
    url = build_database_url(settings)
    engine = create_async_engine(
        url,
        pool_size=settings.db_pool_size,
        max_overflow=0,
        pool_timeout=settings.db_pool_timeout,
        pool_pre_ping=True,
    )
    if session_settings is None:
        session_settings = session_statements(settings, url.get_backend_name())

    logger.info(
        f"Database pool configured for {url.get_backend_name()} "
        f"(size={settings.db_pool_size}, timeout={settings.db_pool_timeout}s)"
    )
    return ConnectionPool(engine, session_settings, timeout=settings.db_pool_timeout)
