"""
Catalog Backend: Minecraft Dungeons Schemas
============================================

What:  Payloads and responses for /api/itens and /api/categorias.
"""

from typing import Literal

from pydantic import BaseModel, Field

from catalog_api.schemas.common import MAX_ID

Rarity = Literal["Comum", "Raro", "Único"]


class DungeonCategoryResponse(BaseModel):
    id: int = Field(description="Category identifier")
    nome: str = Field(description="Category name")


class DungeonItemPayload(BaseModel):
    """
    What:  Body of POST /api/itens and PUT /api/itens/{id}.
    Rules: raridade must be one of Comum, Raro, Único.
           categoria_id is not checked against categorias_d.
    """
    nome: str = Field(min_length=1, description="Item name")
    poder: float = Field(allow_inf_nan=False, description="Item power level")
    raridade: Rarity = Field(description="Rarity: Comum, Raro or Único")
    categoria_id: int = Field(gt=0, le=MAX_ID, description="Category identifier (categorias_d.id)")


class DungeonItemResponse(DungeonItemPayload):
    id: int = Field(description="Item identifier")
