"""
Conversation Repository Port - Interface for conversation persistence.
Implementations: chatcore/infrastructure/persistence/prisma_conversation_repository.py
                 chatcore/infrastructure/persistence/memory/repositories.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from chatcore.domain.entities.conversation import Conversation, ConversationKind
from chatcore.domain.value_objects.conversation_id import ConversationId
from chatcore.domain.value_objects.user_id import UserId


class ConversationRepository(ABC):
    @abstractmethod
    async def create_with_participants(
        self,
        kind: ConversationKind,
        name: Optional[str],
        user_ids: list[UserId],
    ) -> Conversation:
        """
        Atomically create the conversation and one active member row per user.

        A conversation is never observable without its participants.
        """
        ...

    @abstractmethod
    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        """
        Conversation with last_message_at filled in. Participants are not
        loaded; ParticipantRepository.list_by_conversation supplies them.
        """
        ...

    @abstractmethod
    async def list_for_user(self, user_id: UserId) -> list[Conversation]:
        """
        Conversations where the user has an active row, with last_message_at
        filled in, ordered by activity (last message, else created_at) desc.
        """
        ...
