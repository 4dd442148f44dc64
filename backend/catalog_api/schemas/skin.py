"""
Catalog Backend: Minecraft Legends Skin Schemas
================================================
"""

from pydantic import BaseModel, Field


class SkinPayload(BaseModel):
    """
    What:  Body of POST /api/skins and PUT /api/skins/{id}.
    Rules: all four fields are required; a price of 0 is valid, NaN and Infinity are not.
    """
    name: str = Field(min_length=1, description="Skin name")
    imageUrl: str = Field(min_length=1, description="Preview image URL")
    rarity: str = Field(min_length=1, description="Rarity label")
    price: float = Field(allow_inf_nan=False, description="Price in store currency")


class SkinResponse(SkinPayload):
    id: int = Field(description="Skin identifier")
