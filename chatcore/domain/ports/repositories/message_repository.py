"""
Message Repository Port - Interface for message persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional

from chatcore.domain.entities.message import Message, SystemEvent
from chatcore.domain.value_objects.conversation_id import ConversationId
from chatcore.domain.value_objects.message_cursor import MessageCursor
from chatcore.domain.value_objects.message_id import MessageId
from chatcore.domain.value_objects.user_id import UserId


class MessageRepository(ABC):
    @abstractmethod
    async def insert(
        self,
        conversation_id: ConversationId,
        sender_user_id: Optional[UserId],
        text: str,
        system_event: Optional[SystemEvent] = None,
    ) -> Message:
        """
        Persist a message. The storage assigns created_at and an id that is
        monotonically increasing in insertion order.
        """
        ...

    @abstractmethod
    async def get_by_id(self, message_id: MessageId) -> Optional[Message]: ...

    @abstractmethod
    async def query_page(
        self,
        conversation_id: ConversationId,
        before: Optional[MessageCursor],
        limit: int,
    ) -> list[Message]:
        """
        Messages strictly older than `before` (or the newest when None),
        ordered by (created_at desc, id desc), at most `limit` items.
        """
        ...
