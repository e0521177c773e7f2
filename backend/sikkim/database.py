"""
Sikkim Tourism Backend — Database Session Management
======================================================

What:  Async SQLAlchemy engine, scoped session acquisition, and FastAPI dependency.
How:   `Database` wraps one async engine over the SQLite file (aiosqlite driver)
       and a session factory. `Database.session()` is the only way handlers
       reach storage: it commits on success, rolls back on error, and always
       returns the connection.
Who:   Built by create_app() and stored on `app.state.database`; used by the
       bootstrap routine and by route handlers through `get_db_session`.
When:  Engine is created with the app; sessions are created per request.

Foreign keys:
    SQLite leaves foreign key enforcement off unless `PRAGMA foreign_keys=ON`
    is issued per connection. It is deliberately not issued here, so bookings
    may reference destinations that do not exist.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

# SQLite INTEGER is a signed 64-bit value; binding anything wider raises OverflowError
SQLITE_INTEGER_MIN = -(2**63)
SQLITE_INTEGER_MAX = 2**63 - 1


class Base(DeclarativeBase):
    """Base class for the destinations, bookings and contacts ORM models."""
    pass


class Database:
    """
    Owns the engine and hands out scoped sessions.

    Usage:
        async with database.session() as session:
            session.add(Booking(...))
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, echo=echo)
        # expire_on_commit=False: committed objects stay readable after the
        # transaction ends, so services can serialize them outside the session
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Acquire a session for the duration of one unit of work.

        1. Creates a new session from the factory
        2. Yields it to the caller
        3. On success: commits (a no-op if the caller already committed)
        4. On error: rolls back and re-raises
        5. Always: closes the session, returning the connection to the pool
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def dispose(self) -> None:
        """Close every pooled connection. Called at shutdown."""
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides one database session per request.

    Example usage in a route:
        @router.get("/destinations")
        async def list_destinations(db: AsyncSession = Depends(get_db_session)):
            ...

    Raises:
        Exceptions from the handler propagate after rollback, so the global
        error handlers still produce the response.
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
