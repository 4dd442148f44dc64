"""
Catalog Backend: Banner Schemas
================================

What:  Request payload and response model for /banners.

The `images` field is a list on the API side; the service serializes it to
JSON text for storage and decodes it on every read, preserving order.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class BannerPayload(BaseModel):
    """
    What:  Body of POST /banners and PUT /banners/{id}.
    Rules: type and title must be non-empty; images must be a non-empty list.
           description is optional and stored as NULL when absent.
    """
    type: str = Field(min_length=1, description="Banner placement type (e.g. 'hero', 'sidebar')")
    title: str = Field(min_length=1, description="Headline shown on the banner")
    description: Optional[str] = Field(default=None, description="Optional sub-text")
    images: List[str] = Field(min_length=1, description="Ordered image URLs (at least one)")


class BannerResponse(BannerPayload):
    """A stored banner with its store-assigned identifier."""
    id: int = Field(description="Banner identifier")
