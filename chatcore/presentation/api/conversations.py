"""
Conversations API Router - conversations, participants and messages.

- Thin layer: only handles HTTP concerns (request/response)
- Receives ChatFacade via Dependency Injection (Dishka)
- Domain exceptions propagate to the handlers registered in fastapi_app

Flow:
  HTTP Request → Router → ChatFacade → Handler → Repository → Storage
                                 ↓
  HTTP Response ← Router ← DTO ←
"""

from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from chatcore.application.dto import (
    ConversationDTO,
    MessageDTO,
    MessagePageDTO,
    ParticipantDTO,
)
from chatcore.application.services.chat_facade import ChatFacade
from chatcore.domain.entities import ConversationKind, ParticipantRole
from chatcore.domain.exceptions import AccessDeniedError
from chatcore.domain.value_objects import ConversationId, UserId
from chatcore.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateConversationRequest(BaseModel):
    """
    Request body for creating a conversation.

    The caller is always a participant; listing them again is harmless.
    """

    kind: ConversationKind
    participant_user_ids: list[str]
    name: Optional[str] = None


class ListConversationsResponse(BaseModel):
    conversations: list[ConversationDTO]


class AddParticipantRequest(BaseModel):
    user_id: str
    role: ParticipantRole = ParticipantRole.MEMBER


class SendMessageRequest(BaseModel):
    text: str


# ==================== ROUTER ====================

router = APIRouter(prefix="/conversations", tags=["conversations"])


# ==================== CONVERSATIONS ====================


@router.post(
    "",
    response_model=ConversationDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_conversation(
    request: CreateConversationRequest,
    facade: FromDishka[ChatFacade],
    current_user: AuthUser = Depends(get_current_user),
):
    """Create a direct or group conversation."""
    user_ids = [current_user.user_id] + [UserId(u) for u in request.participant_user_ids]
    conversation = await facade.create_conversation(
        request.kind, user_ids, name=request.name
    )
    return ConversationDTO.from_entity(conversation)


@router.get(
    "",
    response_model=ListConversationsResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def list_conversations(
    facade: FromDishka[ChatFacade],
    current_user: AuthUser = Depends(get_current_user),
):
    """List the caller's active conversations, most recent activity first."""
    conversations = await facade.list_conversations(current_user.user_id)
    return ListConversationsResponse(
        conversations=[ConversationDTO.from_entity(c) for c in conversations]
    )


@router.get(
    "/{conversation_id}",
    response_model=ConversationDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def get_conversation(
    conversation_id: str,
    facade: FromDishka[ChatFacade],
    current_user: AuthUser = Depends(get_current_user),
):
    """Get a conversation with its full membership history."""
    conversation = await facade.get_conversation(ConversationId(conversation_id))
    if not any(p.user_id == current_user.user_id for p in conversation.participants):
        raise AccessDeniedError(
            f"User {current_user.user_id.value} is not a participant "
            f"of conversation {conversation_id}"
        )
    return ConversationDTO.from_entity(conversation)


# ==================== PARTICIPANTS ====================


@router.post(
    "/{conversation_id}/participants",
    response_model=ParticipantDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def add_participant(
    conversation_id: str,
    request: AddParticipantRequest,
    facade: FromDishka[ChatFacade],
    current_user: AuthUser = Depends(get_current_user),
):
    """Add a member to a group. The caller must be an active participant."""
    participant = await facade.add_participant(
        ConversationId(conversation_id),
        UserId(request.user_id),
        request.role,
        caller_user_id=current_user.user_id,
    )
    return ParticipantDTO.from_entity(participant)


@router.delete(
    "/{conversation_id}/participants/{user_id}",
    response_model=ParticipantDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def leave_conversation(
    conversation_id: str,
    user_id: str,
    facade: FromDishka[ChatFacade],
    current_user: AuthUser = Depends(get_current_user),
):
    """Leave a conversation. Callers can only remove themselves."""
    leaving = UserId(user_id)
    if leaving != current_user.user_id:
        raise AccessDeniedError("Participants can only leave on their own behalf")
    participant = await facade.leave_conversation(ConversationId(conversation_id), leaving)
    return ParticipantDTO.from_entity(participant)


# ==================== MESSAGES ====================


@router.get(
    "/{conversation_id}/messages",
    response_model=MessagePageDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def list_messages(
    conversation_id: str,
    facade: FromDishka[ChatFacade],
    current_user: AuthUser = Depends(get_current_user),
    before: Optional[str] = None,
    limit: Optional[str] = None,
):
    """
    One page of messages, newest first.

    `limit` is passed through as given: unusable values fall back to the
    default page size and large ones are capped.
    """
    page = await facade.list_messages(
        ConversationId(conversation_id),
        current_user.user_id,
        before=before,
        limit=limit,
    )
    return MessagePageDTO.from_page(page)


@router.post(
    "/{conversation_id}/messages",
    response_model=MessageDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def send_message(
    conversation_id: str,
    request: SendMessageRequest,
    facade: FromDishka[ChatFacade],
    current_user: AuthUser = Depends(get_current_user),
):
    message = await facade.send_message(
        ConversationId(conversation_id), current_user.user_id, request.text
    )
    return MessageDTO.from_entity(message)
