"""
Participant Repository Port - Interface for membership persistence.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from chatcore.domain.entities.participant import Participant, ParticipantRole
from chatcore.domain.value_objects.conversation_id import ConversationId
from chatcore.domain.value_objects.user_id import UserId


class ParticipantRepository(ABC):
    @abstractmethod
    async def list_by_conversation(
        self, conversation_id: ConversationId
    ) -> list[Participant]:
        """Every membership row, active and left, oldest first."""
        ...

    @abstractmethod
    async def get_latest(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> Optional[Participant]:
        """Most recent membership row (active or left), None if never a member."""
        ...

    @abstractmethod
    async def insert(
        self,
        conversation_id: ConversationId,
        user_id: UserId,
        role: ParticipantRole,
    ) -> Participant:
        """
        Insert an active row.

        Raises:
            ConflictError: If the user already has an active row
        """
        ...

    @abstractmethod
    async def set_left(
        self,
        conversation_id: ConversationId,
        user_id: UserId,
        when: datetime,
    ) -> Optional[Participant]:
        """Close the active row. Returns None when there is no active row."""
        ...
