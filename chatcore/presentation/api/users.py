"""
Users API Router - user directory and saved messages.
"""

from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from chatcore.application.commands.users import CreateUserCommand, CreateUserHandler
from chatcore.application.dto import SavedMessageDTO, UserDTO
from chatcore.application.queries.users import (
    GetUserHandler,
    GetUserQuery,
    ListUsersHandler,
    ListUsersQuery,
)
from chatcore.application.services.chat_facade import ChatFacade
from chatcore.domain.exceptions import AccessDeniedError
from chatcore.domain.value_objects import UserId
from chatcore.presentation.dependencies.auth import AuthUser, get_current_user


class CreateUserRequest(BaseModel):
    name: str
    avatar_url: Optional[str] = None


class ListUsersResponse(BaseModel):
    users: list[UserDTO]


class ListBookmarksResponse(BaseModel):
    bookmarks: list[SavedMessageDTO]


router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserDTO, status_code=status.HTTP_201_CREATED)
@inject
async def create_user(
    request: CreateUserRequest,
    handler: FromDishka[CreateUserHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    user = await handler.execute(
        CreateUserCommand(name=request.name, avatar_url=request.avatar_url)
    )
    return UserDTO.from_entity(user)


@router.get("", response_model=ListUsersResponse, status_code=status.HTTP_200_OK)
@inject
async def list_users(
    handler: FromDishka[ListUsersHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    users = await handler.execute(ListUsersQuery())
    return ListUsersResponse(users=[UserDTO.from_entity(u) for u in users])


@router.get("/{user_id}", response_model=UserDTO, status_code=status.HTTP_200_OK)
@inject
async def get_user(
    user_id: str,
    handler: FromDishka[GetUserHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    user = await handler.execute(GetUserQuery(user_id=UserId(user_id)))
    return UserDTO.from_entity(user)


@router.get(
    "/{user_id}/bookmarks",
    response_model=ListBookmarksResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def list_bookmarks(
    user_id: str,
    facade: FromDishka[ChatFacade],
    current_user: AuthUser = Depends(get_current_user),
):
    """Saved messages, newest bookmark first. Only the owner may read them."""
    owner = UserId(user_id)
    if owner != current_user.user_id:
        raise AccessDeniedError("Bookmarks are only visible to their owner")
    saved = await facade.list_bookmarks(owner)
    return ListBookmarksResponse(bookmarks=[SavedMessageDTO.from_entity(s) for s in saved])
