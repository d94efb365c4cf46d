"""
Brewery Backend — Database Engine & Session Management
========================================================

What:  Async SQLAlchemy engine builder, session factory, and transactional scope.
Why:   Centralizes all database connection logic in one place.
How:   `create_app()` builds one engine and one session factory per process and
       hands the factory to the repositories. Each repository call opens its
       own short-lived session through `session_scope()`.

Connection Pooling Strategy (PostgreSQL only):
    pool_size / max_overflow come from settings,
    pool_pre_ping validates connections before use,
    pool_recycle=3600 recycles connections every hour.
    SQLite (tests, local dev) keeps SQLAlchemy's default pool.
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

from brewery.config import Settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object, which Alembic reads for autogenerate
    and `create_schema_on_startup` uses for `create_all()`.
    """
    pass


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for `settings.database_url`."""
    options = {
        # Echo SQL queries in DEBUG mode for development visibility
        "echo": settings.log_level == "DEBUG",
    }
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return create_async_engine(settings.database_url, **options)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Creates AsyncSession instances with consistent configuration.

    expire_on_commit=False: entities returned by a repository stay readable
    after their session has committed and closed.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@asynccontextmanager
async def session_scope(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """
    Provide a transactional session around one unit of work.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the caller (the repository performs queries)
        3. On success: commits the transaction
        4. On error: rolls back the transaction and re-raises
        5. Always: closes the session (returns connection to pool)

    Example:
        async with session_scope(factory) as session:
            session.add(beer)
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


async def dispose_engine(engine: AsyncEngine) -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
