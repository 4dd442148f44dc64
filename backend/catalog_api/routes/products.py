"""
Catalog Backend: Products Route Handlers (Java Edition)
========================================================

What:  Handles /api/products (filtered list, create), /api/products/{id}
       (get, update, delete) and /api/product-types (list).
How:   Query parameters map one-to-one onto ProductService filters.
Who:   Called by the Java Edition downloads page.

Query Parameters (GET /api/products):
    name:  substring match on the product name
    type:  exact match on the product type name (e.g. "Mod", "Map")
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncConnection

from catalog_api.database import get_db_connection
from catalog_api.routes.params import ResourceId
from catalog_api.schemas.common import ErrorResponse
from catalog_api.schemas.product import (
    ProductListItem,
    ProductPayload,
    ProductResponse,
    ProductTypeResponse,
)
from catalog_api.services.product_service import product_service, product_type_service

router = APIRouter(prefix="/api", tags=["Products"])


@router.get(
    "/products",
    response_model=list[ProductListItem],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List products, newest first",
    description=(
        "Returns products joined with their type name, ordered by creation time "
        "(newest first). Both filters are optional and combine with AND."
    ),
)
async def list_products(
    name: Optional[str] = Query(default=None, description="Substring of the product name"),
    type: Optional[str] = Query(default=None, description="Exact product type name"),
    conn: AsyncConnection = Depends(get_db_connection),
):
    return await product_service.list_products(conn, name=name, type_name=type)


@router.get(
    "/products/{product_id}",
    response_model=ProductListItem,
    responses={404: {"description": "Product not found", "model": ErrorResponse}},
    summary="Get a single product by ID",
)
async def get_product(product_id: ResourceId, conn: AsyncConnection = Depends(get_db_connection)):
    return await product_service.get_product(conn, product_id)


@router.post(
    "/products",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid payload", "model": ErrorResponse}},
    summary="Create a product",
)
async def create_product(
    payload: ProductPayload,
    conn: AsyncConnection = Depends(get_db_connection),
):
    return await product_service.create_product(conn, payload)


@router.put(
    "/products/{product_id}",
    response_model=ProductResponse,
    responses={
        400: {"description": "Invalid payload", "model": ErrorResponse},
        404: {"description": "Product not found", "model": ErrorResponse},
    },
    summary="Replace a product",
)
async def update_product(
    product_id: ResourceId,
    payload: ProductPayload,
    conn: AsyncConnection = Depends(get_db_connection),
):
    return await product_service.update_product(conn, product_id, payload)


@router.delete(
    "/products/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Product not found", "model": ErrorResponse}},
    summary="Delete a product",
)
async def delete_product(product_id: ResourceId, conn: AsyncConnection = Depends(get_db_connection)):
    await product_service.delete_product(conn, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/product-types",
    response_model=list[ProductTypeResponse],
    summary="List product types",
    description="Product types ordered by name; used to populate the type filter.",
)
async def list_product_types(conn: AsyncConnection = Depends(get_db_connection)):
    return await product_type_service.list_product_types(conn)
