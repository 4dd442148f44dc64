"""
Catalog Backend: User Service
==============================

What:  Resource handler for users: list, get, create, update, delete.
Who:   Called by routes/users.py.

Email Uniqueness:
    The service never checks for an existing email before writing. The
    users.email UNIQUE constraint rejects the INSERT/UPDATE, the gateway
    reports an IntegrityError, and ResourceService turns it into a
    ConflictError (409). The existing row is left as it was.

Passwords:
    Written on create only; no SELECT in this module reads the column.
"""

from typing import List

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncConnection

from catalog_api.models.user import User
from catalog_api.schemas.user import UserCreate, UserListItem, UserResponse, UserUpdate
from catalog_api.services.base import ResourceService

users = User.__table__

_public_columns = (users.c.id, users.c.name, users.c.email, users.c.created_at)


class UserService(ResourceService):
    resource = "user"
    conflict_message = "The email provided is already in use."

    async def list_users(self, conn: AsyncConnection) -> List[UserListItem]:
        records = await self._fetch_all(conn, select(*_public_columns).order_by(users.c.id))
        return [UserListItem(**record) for record in records]

    async def get_user(self, conn: AsyncConnection, user_id: int) -> UserListItem:
        record = await self._fetch_one(
            conn, select(*_public_columns).where(users.c.id == user_id), user_id
        )
        return UserListItem(**record)

    async def create_user(self, conn: AsyncConnection, payload: UserCreate) -> UserResponse:
        statement = insert(users).values(
            name=payload.name,
            email=payload.email,
            password=payload.password,
        )
        new_id = await self._insert(conn, statement)
        return UserResponse(id=new_id, name=payload.name, email=payload.email)

    async def update_user(
        self, conn: AsyncConnection, user_id: int, payload: UserUpdate
    ) -> UserResponse:
        statement = (
            update(users)
            .where(users.c.id == user_id)
            .values(name=payload.name, email=payload.email)
        )
        await self._write_by_id(conn, statement, user_id, "update")
        return UserResponse(id=user_id, name=payload.name, email=payload.email)

    async def delete_user(self, conn: AsyncConnection, user_id: int) -> None:
        await self._write_by_id(conn, delete(users).where(users.c.id == user_id), user_id, "delete")


# ── Singleton Instance ────────────────────────────────────────────────────
user_service = UserService()
