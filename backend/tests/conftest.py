"""
Catalog Backend: Test Configuration (conftest.py)
==================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets a fresh in-memory SQLite database (aiosqlite, one
       shared connection via StaticPool) with the full schema created from
       Base.metadata. The app's connection dependency is overridden to use it.

Fixture Hierarchy (all function-scoped):
    db_engine
    ├── seeded_catalog: product types, subjects, categories
    ├── test_client: HTTPX AsyncClient wired to the app
    └── db_connection: raw connection for gateway-level tests
"""

import os

# Must be set before catalog_api is imported anywhere
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

import catalog_api.models  # noqa: F401
from catalog_api import database
from catalog_api.database import Base, get_db_connection
from catalog_api.models import DungeonCategory, ProductType, Subject

PRODUCT_TYPES = [
    {"id": 1, "name": "Mod"},
    {"id": 2, "name": "Map"},
    {"id": 3, "name": "Texture Pack"},
]
SUBJECTS = [
    {"id": 1, "name": "Mathematics"},
    {"id": 2, "name": "History"},
]
CATEGORIES = [
    {"id": 1, "nome": "Corpo a corpo"},
    {"id": 2, "nome": "Artefato"},
]


@pytest_asyncio.fixture
async def db_engine():
    """An empty in-memory database with every catalog table."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def seeded_catalog(db_engine):
    """Reference rows that have no write endpoints of their own."""
    async with db_engine.begin() as conn:
        await conn.execute(insert(ProductType.__table__), PRODUCT_TYPES)
        await conn.execute(insert(Subject.__table__), SUBJECTS)
        await conn.execute(insert(DungeonCategory.__table__), CATEGORIES)
    return db_engine


@pytest_asyncio.fixture
async def db_connection(db_engine):
    async with db_engine.connect() as conn:
        yield conn


@pytest_asyncio.fixture
async def test_client(db_engine, monkeypatch):
    """
    HTTPX AsyncClient talking to the FastAPI app through ASGITransport.

    Route handlers get connections from the per-test engine; the health
    check's module-level engine is swapped for the same one.
    """
    from catalog_api.main import app

    async def override_get_db_connection():
        async with db_engine.connect() as conn:
            try:
                yield conn
                await conn.commit()
            except Exception:
                await conn.rollback()
                raise

    monkeypatch.setattr(database, "engine", db_engine)
    app.dependency_overrides[get_db_connection] = override_get_db_connection
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def mock_connection():
    """Stand-in connection for service tests that patch the gateway."""
    return AsyncMock()
