"""
Catalog Backend: Dungeon Service (Minecraft Dungeons)
======================================================

What:  Resource handlers for item categories (list only) and items
       (list with rarity filter, get, create, update, delete).
Who:   Called by routes/dungeons.py.

Rarity Filter:
    GET /api/itens?raridade=Raro adds one predicate, `raridade = :raridade`,
    bound as a parameter. Without the query parameter no predicate is added.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncConnection

from catalog_api.models.dungeon import DungeonCategory, DungeonItem
from catalog_api.schemas.dungeon import (
    DungeonCategoryResponse,
    DungeonItemPayload,
    DungeonItemResponse,
)
from catalog_api.services.base import ResourceService

logger = logging.getLogger(__name__)

categories = DungeonCategory.__table__
items = DungeonItem.__table__


class DungeonCategoryService(ResourceService):
    resource = "category"

    async def list_categories(self, conn: AsyncConnection) -> List[DungeonCategoryResponse]:
        records = await self._fetch_all(conn, select(categories).order_by(categories.c.id))
        return [DungeonCategoryResponse(**record) for record in records]


class DungeonItemService(ResourceService):
    resource = "item"

    async def list_items(
        self, conn: AsyncConnection, raridade: Optional[str] = None
    ) -> List[DungeonItemResponse]:
        query = select(items)
        if raridade:
            query = query.where(items.c.raridade == raridade)
        query = query.order_by(items.c.id)
        logger.debug("Listing items raridade=%r", raridade)

        records = await self._fetch_all(conn, query)
        return [DungeonItemResponse(**record) for record in records]

    async def get_item(self, conn: AsyncConnection, item_id: int) -> DungeonItemResponse:
        record = await self._fetch_one(conn, select(items).where(items.c.id == item_id), item_id)
        return DungeonItemResponse(**record)

    async def create_item(
        self, conn: AsyncConnection, payload: DungeonItemPayload
    ) -> DungeonItemResponse:
        new_id = await self._insert(conn, insert(items).values(**payload.model_dump()))
        return DungeonItemResponse(id=new_id, **payload.model_dump())

    async def update_item(
        self, conn: AsyncConnection, item_id: int, payload: DungeonItemPayload
    ) -> DungeonItemResponse:
        statement = update(items).where(items.c.id == item_id).values(**payload.model_dump())
        await self._write_by_id(conn, statement, item_id, "update")
        return DungeonItemResponse(id=item_id, **payload.model_dump())

    async def delete_item(self, conn: AsyncConnection, item_id: int) -> None:
        await self._write_by_id(conn, delete(items).where(items.c.id == item_id), item_id, "delete")


# ── Singleton Instances ───────────────────────────────────────────────────
category_service = DungeonCategoryService()
item_service = DungeonItemService()
