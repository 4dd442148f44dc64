"""
Catalog Backend: Minecraft Legends Skin Model
==============================================

The `imageUrl` column keeps its camelCase name from the existing schema;
SQLAlchemy quotes it where the dialect requires.
"""

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.database import Base


class Skin(Base):
    __tablename__ = "skins"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    imageUrl: Mapped[str] = mapped_column("imageUrl", String(500), nullable=False)
    rarity: Mapped[str] = mapped_column(String(50), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)

    def __repr__(self) -> str:
        return f"<Skin(id={self.id}, name='{self.name}', rarity='{self.rarity}')>"
