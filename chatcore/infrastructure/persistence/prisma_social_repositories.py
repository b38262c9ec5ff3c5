"""
Prisma Reaction and Bookmark Repository Implementations.

Both tables use composite primary keys, (message_id, user_id, emoji) and
(message_id, user_id), so duplicates are rejected by the insert itself.
"""

from typing import Optional
from prisma import Prisma
from prisma.models import Bookmark as PrismaBookmark
from prisma.models import Reaction as PrismaReaction
from chatcore.domain.entities.bookmark import Bookmark, SavedMessage
from chatcore.domain.entities.reaction import Reaction
from chatcore.domain.ports.repositories import BookmarkRepository, ReactionRepository
from chatcore.domain.value_objects.conversation_id import ConversationId
from chatcore.domain.value_objects.emoji import Emoji
from chatcore.domain.value_objects.message_id import MessageId
from chatcore.domain.value_objects.user_id import UserId
from chatcore.infrastructure.persistence.errors import translate_prisma_errors


class PrismaReactionRepository(ReactionRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaReaction) -> Reaction:
        return Reaction(
            message_id=MessageId(record.message_id),
            user_id=UserId(record.user_id),
            emoji=Emoji(record.emoji),
            created_at=record.created_at,
        )

    async def insert(
        self, message_id: MessageId, user_id: UserId, emoji: Emoji
    ) -> Reaction:
        async with translate_prisma_errors(
            f"User {user_id.value} already reacted with {emoji.value} "
            f"on message {message_id.value}"
        ):
            record = await self._prisma.reaction.create(
                data={
                    "message_id": message_id.value,
                    "user_id": user_id.value,
                    "emoji": emoji.value,
                }
            )
        return self._to_entity(record)

    async def delete(
        self, message_id: MessageId, user_id: UserId, emoji: Emoji
    ) -> Optional[Reaction]:
        async with translate_prisma_errors():
            # delete() returns None when no row matched
            record = await self._prisma.reaction.delete(
                where={
                    "message_id_user_id_emoji": {
                        "message_id": message_id.value,
                        "user_id": user_id.value,
                        "emoji": emoji.value,
                    }
                }
            )
        return self._to_entity(record) if record else None


class PrismaBookmarkRepository(BookmarkRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaBookmark) -> Bookmark:
        return Bookmark(
            message_id=MessageId(record.message_id),
            user_id=UserId(record.user_id),
            created_at=record.created_at,
        )

    async def insert(self, message_id: MessageId, user_id: UserId) -> Bookmark:
        async with translate_prisma_errors(
            f"Message {message_id.value} is already bookmarked by user {user_id.value}"
        ):
            record = await self._prisma.bookmark.create(
                data={"message_id": message_id.value, "user_id": user_id.value}
            )
        return self._to_entity(record)

    async def delete(
        self, message_id: MessageId, user_id: UserId
    ) -> Optional[Bookmark]:
        async with translate_prisma_errors():
            record = await self._prisma.bookmark.delete(
                where={
                    "message_id_user_id": {
                        "message_id": message_id.value,
                        "user_id": user_id.value,
                    }
                }
            )
        return self._to_entity(record) if record else None

    async def list_for_user(self, user_id: UserId) -> list[SavedMessage]:
        async with translate_prisma_errors():
            records = await self._prisma.bookmark.find_many(
                where={"user_id": user_id.value},
                order=[{"created_at": "desc"}, {"message_id": "desc"}],
                include={"message": True},
            )
        return [
            SavedMessage(
                bookmark=self._to_entity(record),
                conversation_id=ConversationId(record.message.conversation_id),
                text=record.message.text,
                message_created_at=record.message.created_at,
            )
            for record in records
            if record.message is not None
        ]
