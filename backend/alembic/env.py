"""
Catalog Backend: Migration Runner
==================================

Alembic entry point for the catalog schema. The database URL always comes
from Settings (DATABASE_URL), never from alembic.ini, so the API and its
migrations can't point at different databases.

    alembic upgrade head          → applies versions/ through the async driver
    alembic upgrade head --sql    → prints the DDL instead of running it
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

import catalog_api.models  # noqa: F401
from catalog_api.config import settings
from catalog_api.database import Base

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name, disable_existing_loggers=False)


def _configure(**options) -> None:
    # SQLite can't ALTER most constraints in place; batch mode rebuilds the table
    context.configure(
        target_metadata=Base.metadata,
        render_as_batch=settings.is_sqlite,
        compare_type=True,
        **options,
    )


def _apply(connection: Connection) -> None:
    _configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def _apply_online(url: str) -> None:
    engine = create_async_engine(url, poolclass=pool.NullPool)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(_apply)
    finally:
        await engine.dispose()


def main() -> None:
    if context.is_offline_mode():
        _configure(url=settings.database_url, literal_binds=True)
        with context.begin_transaction():
            context.run_migrations()
    else:
        asyncio.run(_apply_online(settings.database_url))


main()
