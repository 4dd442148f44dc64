"""
Catalog Backend: User Route Handlers
=====================================

What:  Handles /api/users (list, create) and /api/users/{id} (get, update, delete).
Who:   Called by the account admin panel.

Passwords are accepted on create and never appear in any response body.
A duplicate email on create or update returns 409 Conflict.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncConnection

from catalog_api.database import get_db_connection
from catalog_api.routes.params import ResourceId
from catalog_api.schemas.common import ErrorResponse
from catalog_api.schemas.user import UserCreate, UserListItem, UserResponse, UserUpdate
from catalog_api.services.user_service import user_service

router = APIRouter(prefix="/api/users", tags=["Users"])

_conflict = {409: {"description": "Email already in use", "model": ErrorResponse}}
_not_found = {404: {"description": "User not found", "model": ErrorResponse}}


@router.get("", response_model=list[UserListItem], summary="List users")
async def list_users(conn: AsyncConnection = Depends(get_db_connection)):
    return await user_service.list_users(conn)


@router.get(
    "/{user_id}",
    response_model=UserListItem,
    responses=_not_found,
    summary="Get a single user by ID",
)
async def get_user(user_id: ResourceId, conn: AsyncConnection = Depends(get_db_connection)):
    return await user_service.get_user(conn, user_id)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid payload", "model": ErrorResponse}, **_conflict},
    summary="Register a user",
)
async def create_user(payload: UserCreate, conn: AsyncConnection = Depends(get_db_connection)):
    return await user_service.create_user(conn, payload)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses={**_not_found, **_conflict},
    summary="Update a user's name and email",
)
async def update_user(
    user_id: ResourceId,
    payload: UserUpdate,
    conn: AsyncConnection = Depends(get_db_connection),
):
    return await user_service.update_user(conn, user_id, payload)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_not_found,
    summary="Delete a user",
)
async def delete_user(user_id: ResourceId, conn: AsyncConnection = Depends(get_db_connection)):
    await user_service.delete_user(conn, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
