"""
Catalog Backend: Health Check Tests
====================================
"""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine

from catalog_api import __version__, database


@pytest.mark.asyncio
async def test_healthy_when_database_answers(test_client):
    response = await test_client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "connected"
    assert body["version"] == __version__
    assert body["uptime_seconds"] >= 0


@pytest.mark.asyncio
async def test_unhealthy_when_database_unreachable(test_client, monkeypatch, tmp_path):
    broken = create_async_engine(f"sqlite+aiosqlite:///{tmp_path}/missing/dir/catalog.db")
    monkeypatch.setattr(database, "engine", broken)

    response = await test_client.get("/health")
    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"
    assert response.json()["database"] == "disconnected"

    await broken.dispose()
