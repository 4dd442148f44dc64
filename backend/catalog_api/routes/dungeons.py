"""
Catalog Backend: Dungeons Route Handlers
=========================================

What:  Handles the Minecraft Dungeons catalog:
           GET  /api/categorias          (list categories)
           GET  /api/itens?raridade=...  (list items, optional rarity filter)
           POST /api/itens               (create item)
           GET|PUT|DELETE /api/itens/{id}
Who:   Called by the Dungeons item browser.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncConnection

from catalog_api.database import get_db_connection
from catalog_api.routes.params import ResourceId
from catalog_api.schemas.common import ErrorResponse
from catalog_api.schemas.dungeon import (
    DungeonCategoryResponse,
    DungeonItemPayload,
    DungeonItemResponse,
)
from catalog_api.services.dungeon_service import category_service, item_service

router = APIRouter(prefix="/api", tags=["Dungeons"])


@router.get(
    "/categorias",
    response_model=list[DungeonCategoryResponse],
    summary="List item categories",
)
async def list_categories(conn: AsyncConnection = Depends(get_db_connection)):
    return await category_service.list_categories(conn)


@router.get(
    "/itens",
    response_model=list[DungeonItemResponse],
    summary="List items",
    description="Items ordered by id. `raridade` restricts the list to one rarity.",
)
async def list_items(
    raridade: Optional[str] = Query(default=None, description="Exact rarity to filter by (Comum, Raro, Único)"),
    conn: AsyncConnection = Depends(get_db_connection),
):
    return await item_service.list_items(conn, raridade=raridade)


@router.get(
    "/itens/{item_id}",
    response_model=DungeonItemResponse,
    responses={404: {"description": "Item not found", "model": ErrorResponse}},
    summary="Get a single item by ID",
)
async def get_item(item_id: ResourceId, conn: AsyncConnection = Depends(get_db_connection)):
    return await item_service.get_item(conn, item_id)


@router.post(
    "/itens",
    response_model=DungeonItemResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid payload", "model": ErrorResponse}},
    summary="Create an item",
)
async def create_item(
    payload: DungeonItemPayload,
    conn: AsyncConnection = Depends(get_db_connection),
):
    return await item_service.create_item(conn, payload)


@router.put(
    "/itens/{item_id}",
    response_model=DungeonItemResponse,
    responses={
        400: {"description": "Invalid payload", "model": ErrorResponse},
        404: {"description": "Item not found", "model": ErrorResponse},
    },
    summary="Replace an item",
)
async def update_item(
    item_id: ResourceId,
    payload: DungeonItemPayload,
    conn: AsyncConnection = Depends(get_db_connection),
):
    return await item_service.update_item(conn, item_id, payload)


@router.delete(
    "/itens/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Item not found", "model": ErrorResponse}},
    summary="Delete an item",
)
async def delete_item(item_id: ResourceId, conn: AsyncConnection = Depends(get_db_connection)):
    await item_service.delete_item(conn, item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
