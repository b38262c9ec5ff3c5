"""
Conversation Entity - a direct (two-person) or named group chat.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Iterable, Optional

from chatcore.domain.entities.participant import Participant
from chatcore.domain.exceptions.validation_error import DomainValidationError
from chatcore.domain.value_objects.conversation_id import ConversationId
from chatcore.domain.value_objects.user_id import UserId

DIRECT_PARTICIPANT_COUNT = 2
GROUP_MIN_PARTICIPANTS = 2


class ConversationKind(str, Enum):
    DIRECT = "direct"
    GROUP = "group"


@dataclass
class Conversation:
    id: ConversationId
    kind: ConversationKind
    name: Optional[str]
    created_at: datetime
    # History-inclusive: rows of users who left stay with left_at set
    participants: list[Participant] = field(default_factory=list)
    last_message_at: Optional[datetime] = None

    @staticmethod
    def validate_new(
        kind: ConversationKind,
        name: Optional[str],
        participant_user_ids: Iterable[UserId],
    ) -> list[UserId]:
        """
        Check the shape rules for a conversation about to be created.

        Returns the participant ids with duplicates collapsed (first
        occurrence wins), which is what should be persisted.

        Raises:
            DomainValidationError: If the kind, name and participant count
                do not form a valid direct or group conversation
        """
        user_ids = list(dict.fromkeys(participant_user_ids))

        if kind == ConversationKind.DIRECT:
            if name is not None:
                raise DomainValidationError("Direct conversations cannot have a name")
            if len(user_ids) != DIRECT_PARTICIPANT_COUNT:
                raise DomainValidationError(
                    "Direct conversations require exactly "
                    f"{DIRECT_PARTICIPANT_COUNT} participants, got {len(user_ids)}"
                )
        elif kind == ConversationKind.GROUP:
            if name is None or not name.strip():
                raise DomainValidationError("Group conversations require a name")
            if len(user_ids) < GROUP_MIN_PARTICIPANTS:
                raise DomainValidationError(
                    f"Group conversations require at least {GROUP_MIN_PARTICIPANTS} "
                    f"participants, got {len(user_ids)}"
                )
        else:
            raise DomainValidationError(f"Unknown conversation kind: {kind!r}")

        return user_ids

    @property
    def active_participants(self) -> list[Participant]:
        return [p for p in self.participants if p.is_active]

    @property
    def activity_at(self) -> datetime:
        """Sort key for conversation lists: last message, else creation time."""
        return self.last_message_at or self.created_at
