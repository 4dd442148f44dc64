"""
Catalog Backend: Report Route Handlers
=======================================

What:  Read-only reports spanning several tables.
           GET /api/relatorio/itens          items with their category name
           GET /api/reports/user-downloads   downloads with user and product details
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncConnection

from catalog_api.database import get_db_connection
from catalog_api.schemas.report import DungeonReportItem, UserDownloadReportItem
from catalog_api.services.report_service import report_service

router = APIRouter(prefix="/api", tags=["Reports"])


@router.get(
    "/relatorio/itens",
    response_model=list[DungeonReportItem],
    summary="Dungeon items with category names",
)
async def dungeon_items_report(conn: AsyncConnection = Depends(get_db_connection)):
    return await report_service.dungeon_items(conn)


@router.get(
    "/reports/user-downloads",
    response_model=list[UserDownloadReportItem],
    summary="User downloads, most recent first",
)
async def user_downloads_report(conn: AsyncConnection = Depends(get_db_connection)):
    return await report_service.user_downloads(conn)
