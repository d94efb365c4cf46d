"""
Alembic Migration Environment
===============================

What:  Runs the brewery schema migrations against DATABASE_URL.
How:   The URL comes from brewery.config, never from alembic.ini. Online
       migrations open a throwaway async engine (NullPool) and hand its
       connection to Alembic through `run_sync()`.

SQLite:
    ALTER TABLE support is limited, so revisions run in batch mode there
    (`render_as_batch`). PostgreSQL migrates in place.

Usage (from backend/):
    alembic upgrade head
    alembic revision --autogenerate -m "add beer brewery column"
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import create_async_engine
from alembic import context

from brewery.config import settings
from brewery.database import Base

# Registers both tables on Base.metadata for autogenerate
from brewery.models.beer import Beer  # noqa: F401
from brewery.models.customer import Customer  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

MIGRATION_OPTIONS = {
    "target_metadata": Base.metadata,
    "compare_type": True,
    "render_as_batch": settings.is_sqlite,
}


def run_migrations_offline() -> None:
    """`alembic upgrade head --sql`: print the DDL instead of executing it."""
    context.configure(
        url=settings.database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **MIGRATION_OPTIONS,
    )
    with context.begin_transaction():
        context.run_migrations()


def _migrate(connection) -> None:
    context.configure(connection=connection, **MIGRATION_OPTIONS)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    engine = create_async_engine(settings.database_url, poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
