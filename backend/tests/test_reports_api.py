"""
Catalog Backend: User Downloads Report Tests
=============================================

What:  GET /api/reports/user-downloads joins downloads with users, products
       and product types, most recent download first.
"""

from datetime import datetime

import pytest
from sqlalchemy import insert

from catalog_api.models import Product, User, UserDownload


@pytest.mark.asyncio
async def test_user_downloads_most_recent_first(test_client, seeded_catalog):
    async with seeded_catalog.begin() as conn:
        await conn.execute(
            insert(User.__table__),
            [
                {"id": 1, "name": "Alex", "email": "alex@example.com", "password": "x"},
                {"id": 2, "name": "Steve", "email": "steve@example.com", "password": "y"},
            ],
        )
        await conn.execute(
            insert(Product.__table__),
            [
                {"id": 10, "name": "OptiFine", "type_id": 1, "download_url": "https://d/1"},
                {"id": 11, "name": "SkyBlock", "type_id": 2, "download_url": "https://d/2"},
            ],
        )
        await conn.execute(
            insert(UserDownload.__table__),
            [
                {"user_id": 1, "product_id": 10, "download_date": datetime(2024, 3, 1, 12, 0)},
                {"user_id": 2, "product_id": 11, "download_date": datetime(2024, 3, 5, 9, 30)},
                {"user_id": 1, "product_id": 11, "download_date": datetime(2024, 2, 20, 8, 0)},
            ],
        )

    response = await test_client.get("/api/reports/user-downloads")
    assert response.status_code == 200
    rows = response.json()

    assert [(r["user_name"], r["product_name"]) for r in rows] == [
        ("Steve", "SkyBlock"),
        ("Alex", "OptiFine"),
        ("Alex", "SkyBlock"),
    ]
    assert rows[1]["product_type"] == "Mod"
    assert rows[1]["user_email"] == "alex@example.com"
    assert "password" not in rows[0]


@pytest.mark.asyncio
async def test_empty_report(test_client, seeded_catalog):
    response = await test_client.get("/api/reports/user-downloads")
    assert response.status_code == 200
    assert response.json() == []
