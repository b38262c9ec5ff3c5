"""Message DTOs for API request/response."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from chatcore.application.queries.messages import MessagePage
from chatcore.domain.entities.message import Message


class MessageDTO(BaseModel):
    """DTO for message data returned to frontend."""

    id: int
    conversation_id: str
    sender_user_id: Optional[str] = None
    text: str
    system_event: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, message: Message) -> MessageDTO:
        return cls(
            id=message.id.value,
            conversation_id=message.conversation_id.value,
            sender_user_id=message.sender_user_id.value if message.sender_user_id else None,
            text=message.text,
            system_event=message.system_event.value if message.system_event else None,
            created_at=message.created_at,
        )


class MessagePageDTO(BaseModel):
    messages: list[MessageDTO]
    next_cursor: Optional[str] = None

    @classmethod
    def from_page(cls, page: MessagePage) -> MessagePageDTO:
        return cls(
            messages=[MessageDTO.from_entity(m) for m in page.messages],
            next_cursor=page.next_cursor,
        )
