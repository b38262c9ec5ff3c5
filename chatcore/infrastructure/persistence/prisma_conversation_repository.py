"""
Prisma Conversation Repository Implementation.

Mapping:
- Prisma model fields: id, kind, name, created_at (+ participants, messages relations)
- Domain entity: Conversation with ConversationId and ConversationKind
- last_message_at comes from the newest related message (take=1)
"""

from typing import Optional
from prisma import Prisma
from prisma.models import Conversation as PrismaConversation
from chatcore.domain.entities.conversation import Conversation, ConversationKind
from chatcore.domain.entities.participant import ParticipantRole
from chatcore.domain.ports.repositories import ConversationRepository
from chatcore.domain.value_objects.conversation_id import ConversationId
from chatcore.domain.value_objects.user_id import UserId
from chatcore.infrastructure.persistence.errors import translate_prisma_errors
from chatcore.infrastructure.persistence.prisma_participant_repository import (
    participant_to_entity,
)

_NEWEST_MESSAGE = {
    "order_by": [{"created_at": "desc"}, {"id": "desc"}],
    "take": 1,
}


class PrismaConversationRepository(ConversationRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaConversation) -> Conversation:
        """Map Prisma record to domain entity."""
        participants = sorted(record.participants or [], key=lambda p: p.id)
        return Conversation(
            id=ConversationId(record.id),
            kind=ConversationKind(record.kind),
            name=record.name,
            created_at=record.created_at,
            participants=[participant_to_entity(p) for p in participants],
            last_message_at=record.messages[0].created_at if record.messages else None,
        )

    async def create_with_participants(
        self,
        kind: ConversationKind,
        name: Optional[str],
        user_ids: list[UserId],
    ) -> Conversation:
        """Nested create: conversation and member rows commit in one statement."""
        async with translate_prisma_errors("Duplicate participant in new conversation"):
            record = await self._prisma.conversation.create(
                data={
                    "kind": kind.value,
                    "name": name,
                    "participants": {
                        "create": [
                            {"user_id": u.value, "role": ParticipantRole.MEMBER.value}
                            for u in user_ids
                        ]
                    },
                },
                include={"participants": True, "messages": _NEWEST_MESSAGE},
            )
        return self._to_entity(record)

    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        """Get conversation by ID. Membership comes from the participant repository."""
        async with translate_prisma_errors():
            record = await self._prisma.conversation.find_unique(
                where={"id": conversation_id.value},
                include={"messages": _NEWEST_MESSAGE},
            )
        return self._to_entity(record) if record else None

    async def list_for_user(self, user_id: UserId) -> list[Conversation]:
        """Conversations with an active row for the user, most recent activity first."""
        async with translate_prisma_errors():
            records = await self._prisma.conversation.find_many(
                where={
                    "participants": {
                        "some": {"user_id": user_id.value, "left_at": None}
                    }
                },
                include={"participants": True, "messages": _NEWEST_MESSAGE},
            )
        conversations = [self._to_entity(record) for record in records]
        conversations.sort(key=lambda c: (c.activity_at, c.id.value), reverse=True)
        return conversations
