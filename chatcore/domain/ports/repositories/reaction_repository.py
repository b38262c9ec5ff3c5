"""
Reaction Repository Port - Interface for reaction persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional

from chatcore.domain.entities.reaction import Reaction
from chatcore.domain.value_objects.emoji import Emoji
from chatcore.domain.value_objects.message_id import MessageId
from chatcore.domain.value_objects.user_id import UserId


class ReactionRepository(ABC):
    @abstractmethod
    async def insert(
        self, message_id: MessageId, user_id: UserId, emoji: Emoji
    ) -> Reaction:
        """
        Raises:
            ConflictError: If (message_id, user_id, emoji) already exists
        """
        ...

    @abstractmethod
    async def delete(
        self, message_id: MessageId, user_id: UserId, emoji: Emoji
    ) -> Optional[Reaction]:
        """Hard delete. Returns the removed row, None if there was none."""
        ...
