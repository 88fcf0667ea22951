"""
UserBoard Backend — Database Engine & Session Management
==========================================================

What:  Async SQLAlchemy engine factory, session factory, declarative base,
       and a transactional session scope for the SQL repository.
How:   build_engine() picks pool settings per dialect; session_scope()
       commits on success and rolls back on error.
Who:   Used by SqlUserRepository, the app lifespan, Alembic, and tests.
When:  Engines are built when the SQL backend is selected; sessions per call.

Connection Strategy:
    sqlite+aiosqlite://   In-memory database. StaticPool keeps exactly one
                          connection alive, otherwise every new connection
                          would see a fresh, empty database.
    sqlite file URLs      Default pool, check_same_thread disabled.
    postgresql+asyncpg    pool_size / max_overflow / pre_ping from settings,
                          connections recycled hourly.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from userboard.config import settings


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Models inherit from this to register with the shared metadata object
    used by create_all and by Alembic autogenerate.
    """
    pass


# ── Engine Configuration ──────────────────────────────────────────────────
def _is_memory_sqlite(url: str) -> bool:
    return url.startswith("sqlite") and (url.endswith("://") or ":memory:" in url)


def build_engine(url: str | None = None) -> AsyncEngine:
    """
    Create an async engine for the given URL (defaults to settings.database_url).

    SQLite drivers reject pool_size/max_overflow, so pool arguments are only
    passed for server databases.
    """
    url = url or settings.database_url
    echo = settings.log_level == "DEBUG"

    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if _is_memory_sqlite(url):
            kwargs["poolclass"] = StaticPool
        return create_async_engine(url, echo=echo, **kwargs)

    return create_async_engine(
        url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=settings.db_pool_pre_ping,
        pool_recycle=3600,
        echo=echo,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Session factory bound to an engine.

    expire_on_commit=False keeps attribute access working on returned entities
    after the session that loaded them has been closed.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


# ── Session Scope ─────────────────────────────────────────────────────────
@asynccontextmanager
async def session_scope(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """
    Provide a transactional session for a single repository call.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the caller (the caller performs queries)
        3. On success: commits the transaction
        4. On error: rolls back and re-raises
        5. Always: closes the session (returns connection to pool)

    Example:
        async with session_scope(factory) as session:
            session.add(User(name="Alice"))
    """
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def init_models(engine: AsyncEngine) -> None:
    """
    Create all tables registered on Base.metadata.

    When: App startup with DB_CREATE_ALL enabled, and test fixtures.
    Existing tables are left untouched (CREATE TABLE IF NOT EXISTS semantics).
    """
    # Registers the users table on Base.metadata
    from userboard.models import user  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine(engine: AsyncEngine) -> None:
    """Gracefully close all pooled connections (application shutdown)."""
    await engine.dispose()
