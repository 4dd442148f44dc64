"""
Catalog Backend: Database Connection Management
================================================

What:  Async SQLAlchemy engine, declarative base, and the per-request
       connection dependency.
How:   Creates an async engine with connection pooling, provides a connection
       dependency that commits on success and rolls back on error.
Who:   Used by route handlers via FastAPI's dependency injection system.
When:  Engine is created at module import; connections are checked out per request.

Connection Pooling Strategy:
    pool_size=20:      Persistent connections for normal load
    max_overflow=10:   Temporary connections for traffic spikes (total max = 30)
    pool_pre_ping:     Validates connections before use (catches stale connections)
    pool_recycle=3600: Recycles connections every hour

    SQLite URLs (tests, local experiments) skip the sizing arguments: the
    aiosqlite dialect picks its own pool class.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from catalog_api.config import settings


def build_engine(database_url: str) -> AsyncEngine:
    """
    Create the async engine for a database URL.

    Pool sizing only applies to server databases; SQLite gets the dialect
    defaults.
    """
    options: Dict[str, Any] = {
        # Echo SQL in DEBUG mode for development visibility
        "echo": settings.log_level == "DEBUG",
    }
    if not database_url.startswith("sqlite"):
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return create_async_engine(database_url, **options)


# ── Engine Configuration ──────────────────────────────────────────────────
# The process-wide pool shared by every request
engine = build_engine(settings.database_url)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy table models.

    All models inherit from this class to register with one shared metadata
    object, which Alembic and the test suite use to create the schema.
    """
    pass


# ── Connection Dependency ─────────────────────────────────────────────────
async def get_db_connection() -> AsyncGenerator[AsyncConnection, None]:
    """
    FastAPI dependency that provides a pooled connection per request.

    How it works:
        1. Checks out a connection from the engine's pool
        2. Yields it to the route handler (the handler runs one statement)
        3. On success: commits the implicit transaction
        4. On error: rolls back and re-raises for the global error handler
        5. Always: returns the connection to the pool

    Example usage in a route:
        @router.get("/skins")
        async def list_skins(conn: AsyncConnection = Depends(get_db_connection)):
            return await skin_service.list_skins(conn)
    """
    async with engine.connect() as conn:
        try:
            yield conn
            await conn.commit()
        except Exception:
            await conn.rollback()
            raise


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine() -> None:
    """
    Close every pooled connection.

    When:  Called during application shutdown (lifespan handler), before the
           listener stops.
    """
    await engine.dispose()
