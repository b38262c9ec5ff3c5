"""
Prisma User Repository Implementation.
"""

from typing import Optional
from prisma import Prisma
from prisma.models import User as PrismaUser
from chatcore.domain.entities.user import User
from chatcore.domain.ports.repositories import UserRepository
from chatcore.domain.value_objects.user_id import UserId
from chatcore.infrastructure.persistence.errors import translate_prisma_errors


class PrismaUserRepository(UserRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaUser) -> User:
        """Map Prisma record to domain entity."""
        return User(
            id=UserId(record.id),
            name=record.name,
            created_at=record.created_at,
            avatar_url=record.avatar_url,
        )

    async def create(self, name: str, avatar_url: Optional[str] = None) -> User:
        async with translate_prisma_errors():
            record = await self._prisma.user.create(
                data={"name": name, "avatar_url": avatar_url}
            )
        return self._to_entity(record)

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        async with translate_prisma_errors():
            record = await self._prisma.user.find_unique(where={"id": user_id.value})
        return self._to_entity(record) if record else None

    async def list_all(self) -> list[User]:
        async with translate_prisma_errors():
            records = await self._prisma.user.find_many(order={"created_at": "asc"})
        return [self._to_entity(record) for record in records]
