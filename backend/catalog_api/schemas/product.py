"""
Catalog Backend: Java Edition Product Schemas
==============================================

What:  Payloads and responses for /api/products and /api/product-types.

Two read shapes:
    - ProductResponse: the stored columns, returned by create and update
      (a single INSERT/UPDATE cannot read back the joined type name)
    - ProductListItem: the joined representation returned by list and get,
      adding type_name and the store-assigned created_at
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from catalog_api.schemas.common import MAX_ID


class ProductTypeResponse(BaseModel):
    id: int = Field(description="Product type identifier")
    name: str = Field(description="Product type name (e.g. 'Mod', 'Map')")


class ProductPayload(BaseModel):
    """
    What:  Body of POST /api/products and PUT /api/products/{id}.
    Rules: name, type_id and download_url are required; description is optional.
    """
    name: str = Field(min_length=1, description="Product name")
    description: Optional[str] = Field(default=None, description="Product description")
    type_id: int = Field(gt=0, le=MAX_ID, description="Product type identifier (product_types.id)")
    download_url: str = Field(min_length=1, description="Where the product can be downloaded")


class ProductResponse(ProductPayload):
    id: int = Field(description="Product identifier")


class ProductListItem(BaseModel):
    id: int = Field(description="Product identifier")
    name: str
    description: Optional[str] = None
    type_id: int
    download_url: str
    created_at: datetime = Field(description="When the product was created")
    type_name: Optional[str] = Field(
        default=None, description="Joined product_types.name; null when type_id matches no type"
    )
