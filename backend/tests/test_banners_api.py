"""
Catalog Backend: Banner Endpoint Tests
=======================================

What:  /banners CRUD, with focus on the images list round trip.
"""

import pytest

BANNER = {
    "type": "hero",
    "title": "Caves & Cliffs",
    "description": "Part II is out now",
    "images": [
        "https://cdn.example.com/b/3.png",
        "https://cdn.example.com/b/1.png",
        "https://cdn.example.com/b/2.png",
    ],
}


class TestBannerImages:

    @pytest.mark.asyncio
    async def test_images_come_back_in_submitted_order(self, test_client):
        created = await test_client.post("/banners", json=BANNER)
        assert created.status_code == 201
        banner_id = created.json()["id"]

        fetched = await test_client.get(f"/banners/{banner_id}")
        assert fetched.status_code == 200
        assert fetched.json()["images"] == BANNER["images"]

        listed = await test_client.get("/banners")
        assert listed.json()[0]["images"] == BANNER["images"]

    @pytest.mark.asyncio
    async def test_empty_images_list_is_rejected(self, test_client):
        response = await test_client.post("/banners", json={**BANNER, "images": []})
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["details"]["fields"] == ["images"]

        listed = await test_client.get("/banners")
        assert listed.json() == []

    @pytest.mark.asyncio
    async def test_description_is_optional(self, test_client):
        payload = {k: v for k, v in BANNER.items() if k != "description"}
        created = await test_client.post("/banners", json=payload)
        assert created.status_code == 201
        assert created.json()["description"] is None


class TestBannerUpdateDelete:

    @pytest.mark.asyncio
    async def test_update_replaces_images(self, test_client):
        created = await test_client.post("/banners", json=BANNER)
        banner_id = created.json()["id"]

        updated = await test_client.put(
            f"/banners/{banner_id}", json={**BANNER, "images": ["https://cdn.example.com/only.png"]}
        )
        assert updated.status_code == 200
        assert updated.json()["id"] == banner_id

        fetched = await test_client.get(f"/banners/{banner_id}")
        assert fetched.json()["images"] == ["https://cdn.example.com/only.png"]

    @pytest.mark.asyncio
    async def test_update_missing_banner_returns_404(self, test_client):
        response = await test_client.put("/banners/42", json=BANNER)
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_then_get_returns_404(self, test_client):
        created = await test_client.post("/banners", json=BANNER)
        banner_id = created.json()["id"]

        assert (await test_client.delete(f"/banners/{banner_id}")).status_code == 204
        assert (await test_client.get(f"/banners/{banner_id}")).status_code == 404
