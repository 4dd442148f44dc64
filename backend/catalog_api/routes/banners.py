"""
Catalog Backend: Banner Route Handlers
=======================================

What:  Handles /banners (list, create) and /banners/{id} (get, update, delete).
How:   Extracts path/body parameters, delegates to BannerService, returns JSON.
Who:   Called by the launcher's banner carousel and the admin panel.
"""


from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncConnection

from catalog_api.database import get_db_connection
from catalog_api.routes.params import ResourceId
from catalog_api.schemas.banner import BannerPayload, BannerResponse
from catalog_api.schemas.common import ErrorResponse
from catalog_api.services.banner_service import banner_service

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/banners", tags=["Banners"])


@router.get(
    "",
    response_model=list[BannerResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List banners",
    description="Returns every banner ordered by id, with images decoded to a list.",
)
async def list_banners(conn: AsyncConnection = Depends(get_db_connection)):
    return await banner_service.list_banners(conn)


@router.get(
    "/{banner_id}",
    response_model=BannerResponse,
    responses={
        400: {"description": "Non-numeric id", "model": ErrorResponse},
        404: {"description": "Banner not found", "model": ErrorResponse},
    },
    summary="Get a single banner by ID",
)
async def get_banner(banner_id: ResourceId, conn: AsyncConnection = Depends(get_db_connection)):
    return await banner_service.get_banner(conn, banner_id)


@router.post(
    "",
    response_model=BannerResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid payload", "model": ErrorResponse}},
    summary="Create a banner",
    description="`images` must contain at least one URL; its order is preserved.",
)
async def create_banner(
    payload: BannerPayload,
    conn: AsyncConnection = Depends(get_db_connection),
):
    return await banner_service.create_banner(conn, payload)


@router.put(
    "/{banner_id}",
    response_model=BannerResponse,
    responses={
        400: {"description": "Invalid payload", "model": ErrorResponse},
        404: {"description": "Banner not found", "model": ErrorResponse},
    },
    summary="Replace a banner",
)
async def update_banner(
    banner_id: ResourceId,
    payload: BannerPayload,
    conn: AsyncConnection = Depends(get_db_connection),
):
    return await banner_service.update_banner(conn, banner_id, payload)


@router.delete(
    "/{banner_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Banner not found", "model": ErrorResponse}},
    summary="Delete a banner",
)
async def delete_banner(banner_id: ResourceId, conn: AsyncConnection = Depends(get_db_connection)):
    await banner_service.delete_banner(conn, banner_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
