"""
In-memory implementations of the repository ports.

Rows are copied on the way in and out so callers can never mutate the
store's state behind its back.
"""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Optional
from uuid import uuid4

from chatcore.domain.entities import (
    Bookmark,
    Conversation,
    ConversationKind,
    Message,
    Participant,
    ParticipantRole,
    Reaction,
    SavedMessage,
    SystemEvent,
    User,
)
from chatcore.domain.exceptions import ConflictError
from chatcore.domain.ports.repositories import (
    BookmarkRepository,
    ConversationRepository,
    MessageRepository,
    ParticipantRepository,
    ReactionRepository,
    UserRepository,
)
from chatcore.domain.value_objects import (
    ConversationId,
    Emoji,
    MessageCursor,
    MessageId,
    UserId,
)
from chatcore.infrastructure.persistence.memory.store import InMemoryChatStore

logger = logging.getLogger(__name__)


def _ordering_key(message: Message) -> tuple[datetime, int]:
    return (message.created_at, message.id.value)


class InMemoryConversationRepository(ConversationRepository):
    def __init__(self, store: InMemoryChatStore):
        self._store = store

    def _assemble(
        self, conversation: Conversation, with_participants: bool = True
    ) -> Conversation:
        participants = [
            replace(p)
            for p in self._store.participants
            if with_participants and p.conversation_id == conversation.id
        ]
        timestamps = [
            m.created_at
            for m in self._store.messages.values()
            if m.conversation_id == conversation.id
        ]
        return replace(
            conversation,
            participants=participants,
            last_message_at=max(timestamps) if timestamps else None,
        )

    async def create_with_participants(
        self,
        kind: ConversationKind,
        name: Optional[str],
        user_ids: list[UserId],
    ) -> Conversation:
        self._store.ensure_available()
        now = self._store.clock()
        conversation = Conversation(
            id=ConversationId(str(uuid4())),
            kind=kind,
            name=name,
            created_at=now,
        )
        participants = [
            Participant(
                conversation_id=conversation.id,
                user_id=user_id,
                role=ParticipantRole.MEMBER,
                joined_at=now,
            )
            for user_id in user_ids
        ]
        # Both writes happen without yielding: all or nothing
        self._store.conversations[conversation.id.value] = conversation
        self._store.participants.extend(participants)
        return self._assemble(conversation)

    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        self._store.ensure_available()
        conversation = self._store.conversations.get(conversation_id.value)
        return (
            self._assemble(conversation, with_participants=False)
            if conversation
            else None
        )

    async def list_for_user(self, user_id: UserId) -> list[Conversation]:
        self._store.ensure_available()
        active_in = {
            p.conversation_id.value
            for p in self._store.participants
            if p.user_id == user_id and p.is_active
        }
        conversations = [
            self._assemble(c)
            for c in self._store.conversations.values()
            if c.id.value in active_in
        ]
        conversations.sort(key=lambda c: (c.activity_at, c.id.value), reverse=True)
        return conversations


class InMemoryParticipantRepository(ParticipantRepository):
    def __init__(self, store: InMemoryChatStore):
        self._store = store

    async def list_by_conversation(
        self, conversation_id: ConversationId
    ) -> list[Participant]:
        self._store.ensure_available()
        return [
            replace(p)
            for p in self._store.participants
            if p.conversation_id == conversation_id
        ]

    async def get_latest(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> Optional[Participant]:
        self._store.ensure_available()
        for participant in reversed(self._store.participants):
            if (
                participant.conversation_id == conversation_id
                and participant.user_id == user_id
            ):
                return replace(participant)
        return None

    async def insert(
        self,
        conversation_id: ConversationId,
        user_id: UserId,
        role: ParticipantRole,
    ) -> Participant:
        self._store.ensure_available()
        for existing in self._store.participants:
            if (
                existing.conversation_id == conversation_id
                and existing.user_id == user_id
                and existing.is_active
            ):
                raise ConflictError(
                    f"User {user_id.value} is already an active participant "
                    f"of conversation {conversation_id.value}"
                )
        participant = Participant(
            conversation_id=conversation_id,
            user_id=user_id,
            role=role,
            joined_at=self._store.clock(),
        )
        self._store.participants.append(participant)
        return replace(participant)

    async def set_left(
        self,
        conversation_id: ConversationId,
        user_id: UserId,
        when: datetime,
    ) -> Optional[Participant]:
        self._store.ensure_available()
        for index, existing in enumerate(self._store.participants):
            if (
                existing.conversation_id == conversation_id
                and existing.user_id == user_id
                and existing.is_active
            ):
                left = existing.mark_left(when)
                self._store.participants[index] = left
                return replace(left)
        return None


class InMemoryMessageRepository(MessageRepository):
    def __init__(self, store: InMemoryChatStore):
        self._store = store

    async def insert(
        self,
        conversation_id: ConversationId,
        sender_user_id: Optional[UserId],
        text: str,
        system_event: Optional[SystemEvent] = None,
    ) -> Message:
        self._store.ensure_available()
        message = Message(
            id=MessageId(self._store.next_message_id()),
            conversation_id=conversation_id,
            sender_user_id=sender_user_id,
            text=text,
            created_at=self._store.clock(),
            system_event=system_event,
        )
        self._store.messages[message.id.value] = message
        return replace(message)

    async def get_by_id(self, message_id: MessageId) -> Optional[Message]:
        self._store.ensure_available()
        message = self._store.messages.get(message_id.value)
        return replace(message) if message else None

    async def query_page(
        self,
        conversation_id: ConversationId,
        before: Optional[MessageCursor],
        limit: int,
    ) -> list[Message]:
        self._store.ensure_available()
        candidates = [
            m
            for m in self._store.messages.values()
            if m.conversation_id == conversation_id
            and (before is None or before.is_after(m))
        ]
        candidates.sort(key=_ordering_key, reverse=True)
        return [replace(m) for m in candidates[:limit]]


class InMemoryReactionRepository(ReactionRepository):
    def __init__(self, store: InMemoryChatStore):
        self._store = store

    async def insert(
        self, message_id: MessageId, user_id: UserId, emoji: Emoji
    ) -> Reaction:
        self._store.ensure_available()
        key = (message_id.value, user_id.value, emoji.value)
        if key in self._store.reactions:
            raise ConflictError(
                f"User {user_id.value} already reacted with {emoji.value} "
                f"on message {message_id.value}"
            )
        reaction = Reaction(
            message_id=message_id,
            user_id=user_id,
            emoji=emoji,
            created_at=self._store.clock(),
        )
        self._store.reactions[key] = reaction
        return replace(reaction)

    async def delete(
        self, message_id: MessageId, user_id: UserId, emoji: Emoji
    ) -> Optional[Reaction]:
        self._store.ensure_available()
        removed = self._store.reactions.pop(
            (message_id.value, user_id.value, emoji.value), None
        )
        return replace(removed) if removed else None


class InMemoryBookmarkRepository(BookmarkRepository):
    def __init__(self, store: InMemoryChatStore):
        self._store = store

    async def insert(self, message_id: MessageId, user_id: UserId) -> Bookmark:
        self._store.ensure_available()
        key = (message_id.value, user_id.value)
        if key in self._store.bookmarks:
            raise ConflictError(
                f"Message {message_id.value} is already bookmarked by user {user_id.value}"
            )
        bookmark = Bookmark(
            message_id=message_id,
            user_id=user_id,
            created_at=self._store.clock(),
        )
        self._store.bookmarks[key] = bookmark
        return replace(bookmark)

    async def delete(
        self, message_id: MessageId, user_id: UserId
    ) -> Optional[Bookmark]:
        self._store.ensure_available()
        removed = self._store.bookmarks.pop((message_id.value, user_id.value), None)
        return replace(removed) if removed else None

    async def list_for_user(self, user_id: UserId) -> list[SavedMessage]:
        self._store.ensure_available()
        saved = []
        for (message_key, user_key), bookmark in self._store.bookmarks.items():
            if user_key != user_id.value:
                continue
            message = self._store.messages.get(message_key)
            if message is None:
                logger.warning(
                    f"[InMemoryBookmarkRepository] bookmark points at missing message {message_key}"
                )
                continue
            saved.append(
                SavedMessage(
                    bookmark=replace(bookmark),
                    conversation_id=message.conversation_id,
                    text=message.text,
                    message_created_at=message.created_at,
                )
            )
        saved.sort(
            key=lambda s: (s.bookmark.created_at, s.message_id.value), reverse=True
        )
        return saved


class InMemoryUserRepository(UserRepository):
    def __init__(self, store: InMemoryChatStore):
        self._store = store

    async def create(self, name: str, avatar_url: Optional[str] = None) -> User:
        self._store.ensure_available()
        user = User(
            id=UserId(str(uuid4())),
            name=name,
            created_at=self._store.clock(),
            avatar_url=avatar_url,
        )
        self._store.users[user.id.value] = user
        return replace(user)

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        self._store.ensure_available()
        user = self._store.users.get(user_id.value)
        return replace(user) if user else None

    async def list_all(self) -> list[User]:
        self._store.ensure_available()
        return sorted(
            (replace(u) for u in self._store.users.values()),
            key=lambda u: u.created_at,
        )
