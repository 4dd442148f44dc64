"""
Catalog Backend: User Schemas
==============================

What:  Payloads and responses for /api/users.

Security:
    No response model has a password field, so the password can never be
    serialized back to a client even if a statement selected it.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Body of POST /api/users: name, email and password are required."""
    name: str = Field(min_length=1, description="Display name")
    email: str = Field(min_length=1, description="Unique email address")
    password: str = Field(min_length=1, description="Account password")


class UserUpdate(BaseModel):
    """Body of PUT /api/users/{id}: the password is not changed here."""
    name: str = Field(min_length=1, description="Display name")
    email: str = Field(min_length=1, description="Unique email address")


class UserResponse(BaseModel):
    id: int = Field(description="User identifier")
    name: str
    email: str


class UserListItem(UserResponse):
    created_at: Optional[datetime] = Field(default=None, description="When the user registered")
