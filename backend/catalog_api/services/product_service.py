"""
Catalog Backend: Product Service (Minecraft Java Edition)
==========================================================

What:  Resource handlers for product types (list only) and products
       (filtered list, get, create, update, delete).
How:   Reads left-join product_types to add `type_name` (null for a type_id
       with no matching type); writes touch only the products table.
Who:   Called by routes/products.py.

Filter Construction (GET /api/products):
    ?name=craft   → products.name LIKE '%craft%'      (substring)
    ?type=Mod     → product_types.name = 'Mod'        (exact)
    Both          → combined with AND
    Neither       → no WHERE clause

    Values are bound parameters. `%` and `_` in the name are escaped, so
    they match themselves rather than acting as wildcards.

Query plan (default, no filters):
    SELECT p.id, p.name, ..., pt.name AS type_name
    FROM products p LEFT JOIN product_types pt ON p.type_id = pt.id
    ORDER BY p.created_at DESC, p.id DESC
    → Uses idx_products_created_at; id breaks ties within the same second
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncConnection

from catalog_api.models.product import Product, ProductType
from catalog_api.schemas.product import (
    ProductListItem,
    ProductPayload,
    ProductResponse,
    ProductTypeResponse,
)
from catalog_api.services.base import ResourceService

logger = logging.getLogger(__name__)

products = Product.__table__
product_types = ProductType.__table__


def _joined_select():
    """Products with their type name (NULL for an unknown type_id); base for list and get."""
    return select(
        products.c.id,
        products.c.name,
        products.c.description,
        products.c.type_id,
        products.c.download_url,
        products.c.created_at,
        product_types.c.name.label("type_name"),
    ).select_from(products.outerjoin(product_types, products.c.type_id == product_types.c.id))


class ProductTypeService(ResourceService):
    resource = "product type"

    async def list_product_types(self, conn: AsyncConnection) -> List[ProductTypeResponse]:
        query = select(product_types.c.id, product_types.c.name).order_by(product_types.c.name)
        records = await self._fetch_all(conn, query)
        return [ProductTypeResponse(**record) for record in records]


class ProductService(ResourceService):
    resource = "product"

    async def list_products(
        self,
        conn: AsyncConnection,
        name: Optional[str] = None,
        type_name: Optional[str] = None,
    ) -> List[ProductListItem]:
        """
        List products, newest first, with optional name/type filters.

        Args:
            conn: Connection for the current request
            name: Substring to look for in the product name
            type_name: Exact product type name
        """
        query = _joined_select()
        if name:
            query = query.where(products.c.name.contains(name, autoescape=True))
        if type_name:
            query = query.where(product_types.c.name == type_name)
        query = query.order_by(products.c.created_at.desc(), products.c.id.desc())
        logger.debug("Listing products name=%r type=%r", name, type_name)

        records = await self._fetch_all(conn, query)
        return [ProductListItem(**record) for record in records]

    async def get_product(self, conn: AsyncConnection, product_id: int) -> ProductListItem:
        record = await self._fetch_one(
            conn, _joined_select().where(products.c.id == product_id), product_id
        )
        return ProductListItem(**record)

    async def create_product(
        self, conn: AsyncConnection, payload: ProductPayload
    ) -> ProductResponse:
        new_id = await self._insert(conn, insert(products).values(**payload.model_dump()))
        return ProductResponse(id=new_id, **payload.model_dump())

    async def update_product(
        self, conn: AsyncConnection, product_id: int, payload: ProductPayload
    ) -> ProductResponse:
        statement = (
            update(products)
            .where(products.c.id == product_id)
            .values(**payload.model_dump())
        )
        await self._write_by_id(conn, statement, product_id, "update")
        return ProductResponse(id=product_id, **payload.model_dump())

    async def delete_product(self, conn: AsyncConnection, product_id: int) -> None:
        await self._write_by_id(
            conn, delete(products).where(products.c.id == product_id), product_id, "delete"
        )


# ── Singleton Instances ───────────────────────────────────────────────────
product_type_service = ProductTypeService()
product_service = ProductService()
