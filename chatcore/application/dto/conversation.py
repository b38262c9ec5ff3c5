"""Conversation DTOs for API request/response."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from chatcore.domain.entities.conversation import Conversation
from chatcore.domain.entities.participant import Participant


class ParticipantDTO(BaseModel):
    conversation_id: str
    user_id: str
    role: str
    joined_at: datetime
    left_at: Optional[datetime] = None
    active: bool

    @classmethod
    def from_entity(cls, participant: Participant) -> ParticipantDTO:
        return cls(
            conversation_id=participant.conversation_id.value,
            user_id=participant.user_id.value,
            role=participant.role.value,
            joined_at=participant.joined_at,
            left_at=participant.left_at,
            active=participant.is_active,
        )


class ConversationDTO(BaseModel):
    id: str
    kind: str
    name: Optional[str] = None
    created_at: datetime
    last_message_at: Optional[datetime] = None
    participants: list[ParticipantDTO] = []

    @classmethod
    def from_entity(cls, conversation: Conversation) -> ConversationDTO:
        return cls(
            id=conversation.id.value,
            kind=conversation.kind.value,
            name=conversation.name,
            created_at=conversation.created_at,
            last_message_at=conversation.last_message_at,
            participants=[
                ParticipantDTO.from_entity(p) for p in conversation.participants
            ],
        )
