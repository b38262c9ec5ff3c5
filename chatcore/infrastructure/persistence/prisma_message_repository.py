"""
Prisma Message Repository Implementation.

Prisma Message Model (from prisma/schema.prisma):
    model Message {
        id              Int       @id @default(autoincrement())
        conversation_id String
        sender_user_id  String?
        text            String
        system_event    String?
        created_at      DateTime  @default(now())
    }

The autoincrement id is the tiebreak of the (created_at, id) ordering, so
pages stay total even when two messages share a timestamp.
"""

import logging
from typing import Optional
from prisma import Prisma
from prisma.models import Message as PrismaMessage
from chatcore.domain.entities.message import Message, SystemEvent
from chatcore.domain.ports.repositories.message_repository import MessageRepository
from chatcore.domain.value_objects.conversation_id import ConversationId
from chatcore.domain.value_objects.message_cursor import MessageCursor
from chatcore.domain.value_objects.message_id import MessageId
from chatcore.domain.value_objects.user_id import UserId
from chatcore.infrastructure.persistence.errors import translate_prisma_errors

logger = logging.getLogger(__name__)


class PrismaMessageRepository(MessageRepository):
    """
    Prisma implementation of MessageRepository.

    Handles persistence of Message entities to PostgreSQL via Prisma.
    """

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaMessage) -> Message:
        return Message(
            id=MessageId(record.id),
            conversation_id=ConversationId(record.conversation_id),
            sender_user_id=UserId(record.sender_user_id) if record.sender_user_id else None,
            text=record.text,
            created_at=record.created_at,
            system_event=SystemEvent(record.system_event) if record.system_event else None,
        )

    async def insert(
        self,
        conversation_id: ConversationId,
        sender_user_id: Optional[UserId],
        text: str,
        system_event: Optional[SystemEvent] = None,
    ) -> Message:
        async with translate_prisma_errors():
            record = await self._prisma.message.create(
                data={
                    "conversation_id": conversation_id.value,
                    "sender_user_id": sender_user_id.value if sender_user_id else None,
                    "text": text,
                    "system_event": system_event.value if system_event else None,
                }
            )
        return self._to_entity(record)

    async def get_by_id(self, message_id: MessageId) -> Optional[Message]:
        async with translate_prisma_errors():
            record = await self._prisma.message.find_unique(
                where={"id": message_id.value}
            )
        return self._to_entity(record) if record else None

    async def query_page(
        self,
        conversation_id: ConversationId,
        before: Optional[MessageCursor],
        limit: int,
    ) -> list[Message]:
        """
        One page, newest first.

        Keyset condition for a cursor (t, i):
            created_at < t  OR  (created_at = t AND id < i)
        """
        where: dict = {"conversation_id": conversation_id.value}
        if before is not None:
            where["OR"] = [
                {"created_at": {"lt": before.created_at}},
                {
                    "created_at": before.created_at,
                    "id": {"lt": before.message_id.value},
                },
            ]
        async with translate_prisma_errors():
            records = await self._prisma.message.find_many(
                where=where,
                order=[{"created_at": "desc"}, {"id": "desc"}],
                take=limit,
            )
        logger.debug(
            f"[PrismaMessageRepository] page of {len(records)} for conversation {conversation_id}"
        )
        return [self._to_entity(record) for record in records]
