"""
Catalog Backend: Banner Service
================================

What:  Resource handler for banners: list, get, create, update, delete.
How:   One Core statement per operation, executed through the gateway.
Who:   Called by routes/banners.py.

Images Round Trip:
    write: images (list[str]) → json.dumps → banners.images (TEXT)
    read:  banners.images (TEXT) → json.loads → images (list[str])
    JSON arrays keep their order, so the list comes back exactly as sent.
"""

import json
from typing import Any, Dict, List

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncConnection

from catalog_api.models.banner import Banner
from catalog_api.schemas.banner import BannerPayload, BannerResponse
from catalog_api.services.base import ResourceService

banners = Banner.__table__


def _to_row(payload: BannerPayload) -> Dict[str, Any]:
    """Column values for INSERT/UPDATE; description is NULL when omitted."""
    return {
        "type": payload.type,
        "title": payload.title,
        "description": payload.description,
        "images": json.dumps(payload.images),
    }


def _from_row(record: Dict[str, Any]) -> BannerResponse:
    return BannerResponse(
        id=record["id"],
        type=record["type"],
        title=record["title"],
        description=record["description"],
        images=json.loads(record["images"]),
    )


class BannerService(ResourceService):
    resource = "banner"

    async def list_banners(self, conn: AsyncConnection) -> List[BannerResponse]:
        records = await self._fetch_all(conn, select(banners).order_by(banners.c.id))
        return [_from_row(record) for record in records]

    async def get_banner(self, conn: AsyncConnection, banner_id: int) -> BannerResponse:
        record = await self._fetch_one(
            conn, select(banners).where(banners.c.id == banner_id), banner_id
        )
        return _from_row(record)

    async def create_banner(
        self, conn: AsyncConnection, payload: BannerPayload
    ) -> BannerResponse:
        new_id = await self._insert(conn, insert(banners).values(**_to_row(payload)))
        return BannerResponse(id=new_id, **payload.model_dump())

    async def update_banner(
        self, conn: AsyncConnection, banner_id: int, payload: BannerPayload
    ) -> BannerResponse:
        statement = (
            update(banners)
            .where(banners.c.id == banner_id)
            .values(**_to_row(payload))
        )
        await self._write_by_id(conn, statement, banner_id, "update")
        return BannerResponse(id=banner_id, **payload.model_dump())

    async def delete_banner(self, conn: AsyncConnection, banner_id: int) -> None:
        await self._write_by_id(
            conn, delete(banners).where(banners.c.id == banner_id), banner_id, "delete"
        )


# ── Singleton Instance ────────────────────────────────────────────────────
banner_service = BannerService()
