"""
Catalog Backend: Product Endpoint Tests
========================================

What:  /api/products list filters and ordering, CRUD, and /api/product-types.
"""

import pytest


def product(name, type_id, **extra):
    return {
        "name": name,
        "type_id": type_id,
        "download_url": f"https://downloads.example.com/{name.lower().replace(' ', '-')}.zip",
        **extra,
    }


async def create_products(client, *payloads):
    ids = []
    for payload in payloads:
        response = await client.post("/api/products", json=payload)
        assert response.status_code == 201
        ids.append(response.json()["id"])
    return ids


class TestProductList:

    @pytest.mark.asyncio
    async def test_newest_first_with_type_name(self, test_client, seeded_catalog):
        ids = await create_products(
            test_client,
            product("OptiFine", 1),
            product("SkyBlock", 2),
            product("Faithful", 3),
        )

        response = await test_client.get("/api/products")
        assert response.status_code == 200
        rows = response.json()
        assert [p["id"] for p in rows] == list(reversed(ids))
        assert [p["type_name"] for p in rows] == ["Texture Pack", "Map", "Mod"]
        assert all(p["created_at"] for p in rows)

    @pytest.mark.asyncio
    async def test_type_filter_is_exact(self, test_client, seeded_catalog):
        await create_products(
            test_client,
            product("OptiFine", 1),
            product("SkyBlock", 2),
            product("JourneyMap", 1),
        )

        response = await test_client.get("/api/products", params={"type": "Mod"})
        names = {p["name"] for p in response.json()}
        assert names == {"OptiFine", "JourneyMap"}

        response = await test_client.get("/api/products", params={"type": "Mo"})
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_name_filter_is_substring(self, test_client, seeded_catalog):
        await create_products(
            test_client,
            product("Sky Factory", 2),
            product("SkyBlock", 2),
            product("OptiFine", 1),
        )

        response = await test_client.get("/api/products", params={"name": "Sky"})
        assert {p["name"] for p in response.json()} == {"Sky Factory", "SkyBlock"}

    @pytest.mark.asyncio
    async def test_filters_combine_with_and(self, test_client, seeded_catalog):
        await create_products(
            test_client,
            product("Sky Mod", 1),
            product("SkyBlock", 2),
        )

        response = await test_client.get("/api/products", params={"name": "Sky", "type": "Map"})
        assert [p["name"] for p in response.json()] == ["SkyBlock"]

    @pytest.mark.asyncio
    async def test_like_wildcards_in_name_match_literally(self, test_client, seeded_catalog):
        await create_products(
            test_client,
            product("Sky_Block", 2),
            product("OptiFine", 1),
            product("100% Pure", 3),
        )

        underscore = await test_client.get("/api/products", params={"name": "_"})
        assert [p["name"] for p in underscore.json()] == ["Sky_Block"]

        percent = await test_client.get("/api/products", params={"name": "%"})
        assert [p["name"] for p in percent.json()] == ["100% Pure"]

    @pytest.mark.asyncio
    async def test_product_with_unknown_type_is_still_listed(self, test_client, seeded_catalog):
        [orphan_id] = await create_products(test_client, product("Legacy Pack", 99))
        await create_products(test_client, product("OptiFine", 1))

        fetched = await test_client.get(f"/api/products/{orphan_id}")
        assert fetched.status_code == 200
        assert fetched.json()["type_name"] is None

        listed = await test_client.get("/api/products")
        assert {p["name"]: p["type_name"] for p in listed.json()} == {
            "Legacy Pack": None,
            "OptiFine": "Mod",
        }

        by_type = await test_client.get("/api/products", params={"type": "Mod"})
        assert [p["name"] for p in by_type.json()] == ["OptiFine"]

    @pytest.mark.asyncio
    async def test_filter_value_is_not_sql(self, test_client, seeded_catalog):
        await create_products(test_client, product("OptiFine", 1))

        response = await test_client.get("/api/products", params={"name": "' OR '1'='1"})
        assert response.status_code == 200
        assert response.json() == []


class TestProductCrud:

    @pytest.mark.asyncio
    async def test_get_returns_joined_product(self, test_client, seeded_catalog):
        [product_id] = await create_products(
            test_client, product("OptiFine", 1, description="Performance mod")
        )

        response = await test_client.get(f"/api/products/{product_id}")
        assert response.status_code == 200
        body = response.json()
        assert body["type_name"] == "Mod"
        assert body["description"] == "Performance mod"

    @pytest.mark.asyncio
    async def test_update_missing_product_returns_404(self, test_client, seeded_catalog):
        response = await test_client.put("/api/products/999", json=product("Ghost", 1))
        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_update_returns_updated_entity(self, test_client, seeded_catalog):
        [product_id] = await create_products(test_client, product("OptiFine", 1))

        response = await test_client.put(
            f"/api/products/{product_id}", json=product("OptiFine HD", 3)
        )
        assert response.status_code == 200
        assert response.json()["name"] == "OptiFine HD"

        fetched = await test_client.get(f"/api/products/{product_id}")
        assert fetched.json()["type_name"] == "Texture Pack"

    @pytest.mark.asyncio
    async def test_delete_twice(self, test_client, seeded_catalog):
        [product_id] = await create_products(test_client, product("OptiFine", 1))

        assert (await test_client.delete(f"/api/products/{product_id}")).status_code == 204
        assert (await test_client.delete(f"/api/products/{product_id}")).status_code == 404

    @pytest.mark.asyncio
    async def test_missing_download_url_is_rejected(self, test_client, seeded_catalog):
        response = await test_client.post("/api/products", json={"name": "OptiFine", "type_id": 1})
        assert response.status_code == 400
        assert response.json()["details"]["fields"] == ["download_url"]

    @pytest.mark.asyncio
    async def test_type_id_beyond_integer_column_is_rejected(self, test_client, seeded_catalog):
        response = await test_client.post("/api/products", json=product("OptiFine", 2**31))
        assert response.status_code == 400
        assert response.json()["details"]["fields"] == ["type_id"]

    @pytest.mark.asyncio
    async def test_path_id_beyond_integer_column_is_rejected(self, test_client, seeded_catalog):
        response = await test_client.delete("/api/products/9223372036854775808")
        assert response.status_code == 400
        assert response.json()["details"]["fields"] == ["product_id"]


class TestProductTypes:

    @pytest.mark.asyncio
    async def test_ordered_by_name(self, test_client, seeded_catalog):
        response = await test_client.get("/api/product-types")
        assert response.status_code == 200
        assert [t["name"] for t in response.json()] == ["Map", "Mod", "Texture Pack"]


class TestProductLogging:

    @pytest.mark.asyncio
    async def test_list_logs_its_filters(self, test_client, seeded_catalog, caplog):
        caplog.set_level("DEBUG", logger="catalog_api.services.product_service")

        await test_client.get("/api/products", params={"name": "Sky", "type": "Map"})

        assert "Listing products name='Sky' type='Map'" in caplog.text
