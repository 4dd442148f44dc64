"""
Catalog Backend: Skin Route Handlers
=====================================

What:  Handles /api/skins (list, create) and /api/skins/{id} (get, update, delete).
Who:   Called by the skin shop frontend.

A price of 0 is a valid free skin; only a missing or non-numeric price is
rejected.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncConnection

from catalog_api.database import get_db_connection
from catalog_api.routes.params import ResourceId
from catalog_api.schemas.common import ErrorResponse
from catalog_api.schemas.skin import SkinPayload, SkinResponse
from catalog_api.services.skin_service import skin_service

router = APIRouter(prefix="/api/skins", tags=["Skins"])

_not_found = {404: {"description": "Skin not found", "model": ErrorResponse}}
_invalid = {400: {"description": "Invalid payload or id", "model": ErrorResponse}}


@router.get("", response_model=list[SkinResponse], summary="List skins")
async def list_skins(conn: AsyncConnection = Depends(get_db_connection)):
    return await skin_service.list_skins(conn)


@router.get(
    "/{skin_id}",
    response_model=SkinResponse,
    responses={**_invalid, **_not_found},
    summary="Get a single skin by ID",
)
async def get_skin(skin_id: ResourceId, conn: AsyncConnection = Depends(get_db_connection)):
    return await skin_service.get_skin(conn, skin_id)


@router.post(
    "",
    response_model=SkinResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_invalid,
    summary="Create a skin",
)
async def create_skin(payload: SkinPayload, conn: AsyncConnection = Depends(get_db_connection)):
    return await skin_service.create_skin(conn, payload)


@router.put(
    "/{skin_id}",
    response_model=SkinResponse,
    responses={**_invalid, **_not_found},
    summary="Replace a skin",
)
async def update_skin(
    skin_id: ResourceId,
    payload: SkinPayload,
    conn: AsyncConnection = Depends(get_db_connection),
):
    return await skin_service.update_skin(conn, skin_id, payload)


@router.delete(
    "/{skin_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_not_found,
    summary="Delete a skin",
)
async def delete_skin(skin_id: ResourceId, conn: AsyncConnection = Depends(get_db_connection)):
    await skin_service.delete_skin(conn, skin_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
