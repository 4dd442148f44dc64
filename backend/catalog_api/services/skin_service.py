"""
Catalog Backend: Skin Service (Minecraft Legends)
==================================================

What:  Resource handler for skins: list, get, create, update, delete.
How:   One Core statement per operation, executed through the gateway.
Who:   Called by routes/skins.py.
"""

from typing import List

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncConnection

from catalog_api.models.skin import Skin
from catalog_api.schemas.skin import SkinPayload, SkinResponse
from catalog_api.services.base import ResourceService

skins = Skin.__table__

_columns = (skins.c.id, skins.c.name, skins.c.imageUrl, skins.c.rarity, skins.c.price)


class SkinService(ResourceService):
    resource = "skin"

    async def list_skins(self, conn: AsyncConnection) -> List[SkinResponse]:
        records = await self._fetch_all(conn, select(*_columns).order_by(skins.c.id))
        return [SkinResponse(**record) for record in records]

    async def get_skin(self, conn: AsyncConnection, skin_id: int) -> SkinResponse:
        record = await self._fetch_one(
            conn, select(*_columns).where(skins.c.id == skin_id), skin_id
        )
        return SkinResponse(**record)

    async def create_skin(self, conn: AsyncConnection, payload: SkinPayload) -> SkinResponse:
        new_id = await self._insert(conn, insert(skins).values(**payload.model_dump()))
        return SkinResponse(id=new_id, **payload.model_dump())

    async def update_skin(
        self, conn: AsyncConnection, skin_id: int, payload: SkinPayload
    ) -> SkinResponse:
        statement = (
            update(skins)
            .where(skins.c.id == skin_id)
            .values(**payload.model_dump())
        )
        await self._write_by_id(conn, statement, skin_id, "update")
        return SkinResponse(id=skin_id, **payload.model_dump())

    async def delete_skin(self, conn: AsyncConnection, skin_id: int) -> None:
        await self._write_by_id(conn, delete(skins).where(skins.c.id == skin_id), skin_id, "delete")


# ── Singleton Instance ────────────────────────────────────────────────────
skin_service = SkinService()
