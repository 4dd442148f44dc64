"""
Catalog Backend: Report Schemas
================================

Read-only views built from joins across the catalog tables.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class DungeonReportItem(BaseModel):
    """One Dungeons item with its category name (GET /api/relatorio/itens)."""
    id: int
    nome: str
    poder: float
    raridade: str
    nome_categoria: str = Field(description="Joined categorias_d.nome")


class UserDownloadReportItem(BaseModel):
    """One download event (GET /api/reports/user-downloads)."""
    user_id: int
    user_name: str
    user_email: str
    product_id: int
    product_name: str
    product_type: str = Field(description="Joined product_types.name")
    download_date: datetime
