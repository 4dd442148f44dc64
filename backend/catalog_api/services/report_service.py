"""
Catalog Backend: Report Service
================================

What:  Read-only report views across several tables.
Who:   Called by routes/reports.py.

Reports:
    dungeon_items():   itens_d ⋈ categorias_d           (GET /api/relatorio/itens)
    user_downloads():  user_downloads ⋈ users ⋈ products ⋈ product_types
                                                        (GET /api/reports/user-downloads)
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncConnection

from catalog_api.models.dungeon import DungeonCategory, DungeonItem
from catalog_api.models.product import Product, ProductType
from catalog_api.models.user import User, UserDownload
from catalog_api.schemas.report import DungeonReportItem, UserDownloadReportItem
from catalog_api.services.base import ResourceService

items = DungeonItem.__table__
categories = DungeonCategory.__table__
downloads = UserDownload.__table__
users = User.__table__
products = Product.__table__
product_types = ProductType.__table__


class ReportService(ResourceService):
    resource = "report"

    async def dungeon_items(self, conn: AsyncConnection) -> List[DungeonReportItem]:
        query = (
            select(
                items.c.id,
                items.c.nome,
                items.c.poder,
                items.c.raridade,
                categories.c.nome.label("nome_categoria"),
            )
            .select_from(items.join(categories, items.c.categoria_id == categories.c.id))
            .order_by(items.c.id)
        )
        records = await self._fetch_all(conn, query, "generate")
        return [DungeonReportItem(**record) for record in records]

    async def user_downloads(self, conn: AsyncConnection) -> List[UserDownloadReportItem]:
        query = (
            select(
                users.c.id.label("user_id"),
                users.c.name.label("user_name"),
                users.c.email.label("user_email"),
                products.c.id.label("product_id"),
                products.c.name.label("product_name"),
                product_types.c.name.label("product_type"),
                downloads.c.download_date,
            )
            .select_from(
                downloads
                .join(users, downloads.c.user_id == users.c.id)
                .join(products, downloads.c.product_id == products.c.id)
                .join(product_types, products.c.type_id == product_types.c.id)
            )
            .order_by(downloads.c.download_date.desc())
        )
        records = await self._fetch_all(conn, query, "generate")
        return [UserDownloadReportItem(**record) for record in records]


# ── Singleton Instance ────────────────────────────────────────────────────
report_service = ReportService()
