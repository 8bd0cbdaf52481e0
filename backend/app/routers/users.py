"""
User directory router: create, read, update and delete users by name.

Paths keep the names of the original function endpoints so existing
clients continue to work.
"""
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from app.database.connections import get_database
from app.database.databases import users_db
from app.schemas.user import (
    MessageResponse,
    UserCreate,
    UserCreateResponse,
    UserResponse,
)
from app.services.user_service import UserService

router = APIRouter(tags=["Users"])

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"description": "Missing or invalid input"},
    status.HTTP_404_NOT_FOUND: {"description": "User not found"},
    status.HTTP_405_METHOD_NOT_ALLOWED: {"description": "Wrong HTTP method"},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Storage failure"},
}


async def get_user_service() -> UserService:
    """Dependency to get UserService instance."""
    db = await get_database()
    return UserService(db[users_db.Collections.USERS])


@router.post(
    "/signUp",
    response_model=UserCreateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    responses={
        code: info for code, info in ERROR_RESPONSES.items()
        if code != status.HTTP_404_NOT_FOUND
    },
)
async def sign_up(
    body: UserCreate,
    user_service: UserService = Depends(get_user_service),
):
    """
    Create a new user.

    - **name**: Required, must not contain Korean characters
    - **email**: Required, must contain `@`
    """
    return await user_service.create_user(body)


@router.get(
    "/getUser",
    summary="Get a user by name",
    responses={status.HTTP_200_OK: {"model": UserResponse}, **ERROR_RESPONSES},
)
async def get_user(
    name: Optional[str] = Query(None, description="Exact user name"),
    user_service: UserService = Depends(get_user_service),
) -> dict[str, Any]:
    """
    Get the first user whose name matches exactly (case-sensitive).

    Returns the user ID and every stored field.
    """
    return await user_service.get_user(name)


@router.put(
    "/updateUser",
    response_model=MessageResponse,
    summary="Update a user by name",
    responses=ERROR_RESPONSES,
)
async def update_user(
    name: Optional[str] = Query(None, description="Exact user name"),
    fields: Optional[dict[str, Any]] = Body(None, description="Fields to overwrite"),
    user_service: UserService = Depends(get_user_service),
):
    """
    Merge the request body into the first user with this name.

    Only the listed fields change. A new `email` must contain `@`;
    `id` and `createdAt` cannot be changed.
    """
    return await user_service.update_user(name, fields)


@router.delete(
    "/deleteUser",
    response_model=MessageResponse,
    summary="Delete a user by name",
    responses={
        status.HTTP_403_FORBIDDEN: {"description": "User is less than 1 minute old"},
        **ERROR_RESPONSES,
    },
)
async def delete_user(
    name: Optional[str] = Query(None, description="Exact user name"),
    user_service: UserService = Depends(get_user_service),
):
    """
    Delete the first user with this name.

    Users created less than a minute ago cannot be deleted.
    """
    return await user_service.delete_user(name)
