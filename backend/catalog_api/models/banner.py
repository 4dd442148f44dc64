"""
Catalog Backend: Banner Model
==============================

What:  Table model for the `banners` table.
Who:   Used by BannerService to build statements and by Alembic.

Column notes:
    - images: the ordered list of image URLs, stored JSON-encoded in a TEXT
      column and decoded back to a list on every read.
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.database import Base


class Banner(Base):
    """A promotional banner with one or more images."""

    __tablename__ = "banners"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # JSON array of URL strings, order preserved
    images: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Banner(id={self.id}, type='{self.type}', title='{self.title}')>"
