"""
Messages API Router - reactions and bookmarks on a single message.
"""

from fastapi import APIRouter, Depends, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel

from chatcore.application.dto import BookmarkDTO, ReactionDTO
from chatcore.application.services.chat_facade import ChatFacade
from chatcore.domain.value_objects import Emoji, MessageId
from chatcore.presentation.dependencies.auth import AuthUser, get_current_user


class AddReactionRequest(BaseModel):
    emoji: str


class BookmarkResponse(BaseModel):
    status: str
    bookmark: BookmarkDTO


class UnbookmarkResponse(BaseModel):
    status: str


router = APIRouter(prefix="/messages", tags=["messages"])


# ==================== REACTIONS ====================


@router.post(
    "/{message_id}/reactions",
    response_model=ReactionDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def add_reaction(
    message_id: str,
    request: AddReactionRequest,
    facade: FromDishka[ChatFacade],
    current_user: AuthUser = Depends(get_current_user),
):
    reaction = await facade.add_reaction(
        MessageId.parse(message_id), current_user.user_id, Emoji(request.emoji)
    )
    return ReactionDTO.from_entity(reaction)


@router.delete(
    "/{message_id}/reactions/{emoji}",
    response_model=ReactionDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def remove_reaction(
    message_id: str,
    emoji: str,
    facade: FromDishka[ChatFacade],
    current_user: AuthUser = Depends(get_current_user),
):
    reaction = await facade.remove_reaction(
        MessageId.parse(message_id), Emoji(emoji), current_user.user_id
    )
    return ReactionDTO.from_entity(reaction)


# ==================== BOOKMARKS ====================


@router.post(
    "/{message_id}/bookmarks",
    response_model=BookmarkResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def add_bookmark(
    message_id: str,
    facade: FromDishka[ChatFacade],
    current_user: AuthUser = Depends(get_current_user),
):
    bookmark = await facade.add_bookmark(
        MessageId.parse(message_id), current_user.user_id
    )
    return BookmarkResponse(
        status="bookmarked", bookmark=BookmarkDTO.from_entity(bookmark)
    )


@router.delete(
    "/{message_id}/bookmarks",
    response_model=UnbookmarkResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def remove_bookmark(
    message_id: str,
    facade: FromDishka[ChatFacade],
    current_user: AuthUser = Depends(get_current_user),
):
    await facade.remove_bookmark(MessageId.parse(message_id), current_user.user_id)
    return UnbookmarkResponse(status="unbookmarked")
