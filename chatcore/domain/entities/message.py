"""
Message Entity - a user message or a system-generated membership notice.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from chatcore.domain.exceptions.validation_error import DomainValidationError
from chatcore.domain.value_objects.conversation_id import ConversationId
from chatcore.domain.value_objects.message_id import MessageId
from chatcore.domain.value_objects.user_id import UserId


class SystemEvent(str, Enum):
    JOIN = "join"
    LEAVE = "leave"


@dataclass
class Message:
    id: MessageId
    conversation_id: ConversationId
    sender_user_id: Optional[UserId]
    text: str
    created_at: datetime
    system_event: Optional[SystemEvent] = None

    def __post_init__(self):
        # system_event present <=> no human sender
        if (self.system_event is None) == (self.sender_user_id is None):
            raise DomainValidationError(
                "A message has either a sender or a system event, not both or neither"
            )

    @property
    def is_system(self) -> bool:
        return self.system_event is not None

    @staticmethod
    def validate_text(text: str) -> None:
        if not text or not text.strip():
            raise DomainValidationError("Message text cannot be empty")
