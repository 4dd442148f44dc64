"""
Catalog Backend: Java Edition Product Models
=============================================

What:  Product types (`product_types`) and downloadable products (`products`).
Who:   Used by product_service.py, report_service.py and Alembic.

Query Patterns:
    - List products: JOIN product_types for type_name, ORDER BY created_at DESC
    - Filter by type: WHERE product_types.name = :type (exact match)
    - Filter by name: WHERE products.name LIKE '%' || :name || '%'
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.database import Base


class ProductType(Base):
    """Product category (Mod, Map, Texture Pack, ...). Read-only."""

    __tablename__ = "product_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        return f"<ProductType(id={self.id}, name='{self.name}')>"


class Product(Base):
    """A downloadable Java Edition product."""

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    type_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("product_types.id"), nullable=False
    )
    download_url: Mapped[str] = mapped_column(String(500), nullable=False)

    # Assigned by the store on insert; never written by the API
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    __table_args__ = (
        Index("idx_products_created_at", created_at.desc()),
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name='{self.name}', type_id={self.type_id})>"
