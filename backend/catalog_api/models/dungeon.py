"""
Catalog Backend: Minecraft Dungeons Models
===========================================

What:  Item categories (`categorias_d`) and items (`itens_d`).
Who:   Used by dungeon_service.py, report_service.py and Alembic.

Column names follow the existing Portuguese schema (nome, poder, raridade).
"""

from sqlalchemy import Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.database import Base


class DungeonCategory(Base):
    """Item category (Melee, Ranged, Armor, Artifact, ...). Read-only."""

    __tablename__ = "categorias_d"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nome: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        return f"<DungeonCategory(id={self.id}, nome='{self.nome}')>"


class DungeonItem(Base):
    """
    A Dungeons item.

    categoria_id references categorias_d.id; the handlers never check it,
    referential integrity is left to the store.
    """

    __tablename__ = "itens_d"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nome: Mapped[str] = mapped_column(String(255), nullable=False)
    poder: Mapped[float] = mapped_column(Float, nullable=False)
    raridade: Mapped[str] = mapped_column(String(20), nullable=False)
    categoria_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("categorias_d.id"), nullable=False
    )

    def __repr__(self) -> str:
        return f"<DungeonItem(id={self.id}, nome='{self.nome}', raridade='{self.raridade}')>"
