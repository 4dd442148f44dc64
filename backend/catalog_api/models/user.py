"""
Catalog Backend: User Models
=============================

What:  Users (`users`) and their product downloads (`user_downloads`).
Who:   Used by user_service.py, report_service.py and Alembic.

Constraints:
    - users.email is UNIQUE. Duplicate detection is the store's job; the
      service only translates the resulting IntegrityError into a 409.
    - users.password is stored as submitted and never selected by any
      read statement.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.database import Base


class User(Base):
    """A registered catalog user."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"


class UserDownload(Base):
    """
    One product download by one user.

    Written by the storefront outside this service; read only by the
    user-downloads report.
    """

    __tablename__ = "user_downloads"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False)
    product_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("products.id"), nullable=False
    )
    download_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<UserDownload(user_id={self.user_id}, product_id={self.product_id})>"
