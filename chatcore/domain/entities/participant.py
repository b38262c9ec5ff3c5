"""
Participant Entity - one membership interval of a user in a conversation.

Rows are never deleted. Leaving sets left_at; rejoining appends a new row,
so at most one row per (conversation, user) has left_at = None.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Optional

from chatcore.domain.value_objects.conversation_id import ConversationId
from chatcore.domain.value_objects.user_id import UserId


class ParticipantRole(str, Enum):
    MEMBER = "member"
    ADMIN = "admin"


@dataclass
class Participant:
    conversation_id: ConversationId
    user_id: UserId
    role: ParticipantRole
    joined_at: datetime
    left_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.left_at is None

    def mark_left(self, when: datetime) -> Participant:
        return replace(self, left_at=when)
