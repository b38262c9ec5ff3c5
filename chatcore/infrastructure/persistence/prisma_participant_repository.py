"""
Prisma Participant Repository Implementation.

The table carries a partial unique index on (conversation_id, user_id)
WHERE left_at IS NULL (see prisma/migrations), so a concurrent duplicate
join fails inside the database and surfaces here as ConflictError.
"""

from datetime import datetime
from typing import Optional
from prisma import Prisma
from prisma.models import Participant as PrismaParticipant
from chatcore.domain.entities.participant import Participant, ParticipantRole
from chatcore.domain.ports.repositories import ParticipantRepository
from chatcore.domain.value_objects.conversation_id import ConversationId
from chatcore.domain.value_objects.user_id import UserId
from chatcore.infrastructure.persistence.errors import translate_prisma_errors


def participant_to_entity(record: PrismaParticipant) -> Participant:
    return Participant(
        conversation_id=ConversationId(record.conversation_id),
        user_id=UserId(record.user_id),
        role=ParticipantRole(record.role),
        joined_at=record.joined_at,
        left_at=record.left_at,
    )


class PrismaParticipantRepository(ParticipantRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    async def list_by_conversation(
        self, conversation_id: ConversationId
    ) -> list[Participant]:
        async with translate_prisma_errors():
            records = await self._prisma.participant.find_many(
                where={"conversation_id": conversation_id.value},
                order={"id": "asc"},
            )
        return [participant_to_entity(r) for r in records]

    async def get_latest(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> Optional[Participant]:
        async with translate_prisma_errors():
            record = await self._prisma.participant.find_first(
                where={
                    "conversation_id": conversation_id.value,
                    "user_id": user_id.value,
                },
                order={"id": "desc"},
            )
        return participant_to_entity(record) if record else None

    async def insert(
        self,
        conversation_id: ConversationId,
        user_id: UserId,
        role: ParticipantRole,
    ) -> Participant:
        async with translate_prisma_errors(
            f"User {user_id.value} is already an active participant "
            f"of conversation {conversation_id.value}"
        ):
            record = await self._prisma.participant.create(
                data={
                    "conversation_id": conversation_id.value,
                    "user_id": user_id.value,
                    "role": role.value,
                }
            )
        return participant_to_entity(record)

    async def set_left(
        self,
        conversation_id: ConversationId,
        user_id: UserId,
        when: datetime,
    ) -> Optional[Participant]:
        async with translate_prisma_errors():
            active = await self._prisma.participant.find_first(
                where={
                    "conversation_id": conversation_id.value,
                    "user_id": user_id.value,
                    "left_at": None,
                },
                order={"id": "desc"},
            )
            if active is None:
                return None
            # Conditional on the row still being active, so two racing
            # leaves cannot both succeed
            updated = await self._prisma.participant.update_many(
                where={"id": active.id, "left_at": None},
                data={"left_at": when},
            )
            if updated == 0:
                return None
            # Re-read by primary key: the column stores milliseconds only
            record = await self._prisma.participant.find_unique(
                where={"id": active.id}
            )
        return participant_to_entity(record) if record else None
