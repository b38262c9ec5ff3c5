"""
ChatFacade - the single entry point the request layer talks to.

Each method delegates to the command/query handler that owns the
operation, and that handler performs the participant authorization, so
it runs exactly once. The facade adds no rules of its own; it only
composes:

- Join/leave are "mutate-then-advise": the membership change is persisted
  first, then a system message is emitted best-effort. Failing to emit is
  logged and does not undo or fail the membership change.
- Every method accepts a `timeout` (seconds). Expiry cancels the pending
  storage call and surfaces as StorageUnavailableError, which callers may
  retry. A write that already committed stands.

The facade never retries internally.
"""

import asyncio
import logging
from typing import Any, Awaitable, Iterable, Optional, TypeVar

from chatcore.application.commands.bookmarks import (
    AddBookmarkCommand,
    AddBookmarkHandler,
    RemoveBookmarkCommand,
    RemoveBookmarkHandler,
)
from chatcore.application.commands.conversations import (
    CreateConversationCommand,
    CreateConversationHandler,
)
from chatcore.application.commands.messages import (
    EmitSystemMessageCommand,
    EmitSystemMessageHandler,
    SendMessageCommand,
    SendMessageHandler,
)
from chatcore.application.commands.participants import (
    AddParticipantCommand,
    AddParticipantHandler,
    MarkParticipantLeftCommand,
    MarkParticipantLeftHandler,
)
from chatcore.application.commands.reactions import (
    AddReactionCommand,
    AddReactionHandler,
    RemoveReactionCommand,
    RemoveReactionHandler,
)
from chatcore.application.queries.bookmarks import (
    ListBookmarksHandler,
    ListBookmarksQuery,
)
from chatcore.application.queries.conversations import (
    GetConversationHandler,
    GetConversationQuery,
    ListConversationsHandler,
    ListConversationsQuery,
)
from chatcore.application.queries.messages import (
    ListMessagesHandler,
    ListMessagesQuery,
    MessagePage,
)
from chatcore.config.settings import Config
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
)
from chatcore.domain.exceptions import StorageUnavailableError
from chatcore.domain.ports.repositories import (
    BookmarkRepository,
    ConversationRepository,
    MessageRepository,
    ParticipantRepository,
    ReactionRepository,
)
from chatcore.domain.value_objects import ConversationId, Emoji, MessageId, UserId

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ChatFacade:
    """Conversation, participant, message, reaction and bookmark operations."""

    def __init__(
        self,
        conversation_repository: ConversationRepository,
        participant_repository: ParticipantRepository,
        message_repository: MessageRepository,
        reaction_repository: ReactionRepository,
        bookmark_repository: BookmarkRepository,
        default_page_limit: int = Config.MESSAGE_PAGE_DEFAULT_LIMIT,
        max_page_limit: int = Config.MESSAGE_PAGE_MAX_LIMIT,
    ):
        self._create_conversation = CreateConversationHandler(conversation_repository)
        self._get_conversation = GetConversationHandler(
            conversation_repository, participant_repository
        )
        self._list_conversations = ListConversationsHandler(conversation_repository)

        self._add_participant = AddParticipantHandler(
            conversation_repository, participant_repository
        )
        self._mark_left = MarkParticipantLeftHandler(participant_repository)

        self._send_message = SendMessageHandler(
            participant_repository, message_repository
        )
        self._emit_system_message = EmitSystemMessageHandler(message_repository)
        self._list_messages = ListMessagesHandler(
            participant_repository,
            message_repository,
            default_limit=default_page_limit,
            max_limit=max_page_limit,
        )

        self._add_reaction = AddReactionHandler(
            message_repository, reaction_repository, participant_repository
        )
        self._remove_reaction = RemoveReactionHandler(reaction_repository)

        self._add_bookmark = AddBookmarkHandler(
            message_repository, bookmark_repository, participant_repository
        )
        self._remove_bookmark = RemoveBookmarkHandler(bookmark_repository)
        self._list_bookmarks = ListBookmarksHandler(bookmark_repository)

    async def _run(self, operation: Awaitable[T], timeout: Optional[float]) -> T:
        if timeout is None:
            return await operation
        try:
            return await asyncio.wait_for(operation, timeout)
        except asyncio.TimeoutError as e:
            logger.warning(f"[ChatFacade] operation exceeded deadline of {timeout}s")
            raise StorageUnavailableError(
                f"Operation did not complete within {timeout}s"
            ) from e

    # ==================== CONVERSATIONS ====================

    async def create_conversation(
        self,
        kind: ConversationKind,
        participant_user_ids: Iterable[UserId],
        name: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Conversation:
        command = CreateConversationCommand(
            kind=kind,
            participant_user_ids=tuple(participant_user_ids),
            name=name,
        )
        return await self._run(self._create_conversation.execute(command), timeout)

    async def get_conversation(
        self, conversation_id: ConversationId, *, timeout: Optional[float] = None
    ) -> Conversation:
        query = GetConversationQuery(conversation_id=conversation_id)
        return await self._run(self._get_conversation.execute(query), timeout)

    async def list_conversations(
        self, user_id: UserId, *, timeout: Optional[float] = None
    ) -> list[Conversation]:
        query = ListConversationsQuery(user_id=user_id)
        return await self._run(self._list_conversations.execute(query), timeout)

    # ==================== PARTICIPANTS ====================

    async def add_participant(
        self,
        conversation_id: ConversationId,
        user_id: UserId,
        role: ParticipantRole = ParticipantRole.MEMBER,
        *,
        caller_user_id: UserId,
        timeout: Optional[float] = None,
    ) -> Participant:
        """`caller_user_id` must be an active participant."""
        command = AddParticipantCommand(conversation_id, user_id, caller_user_id, role)
        return await self._run(self._join(command), timeout)

    async def leave_conversation(
        self,
        conversation_id: ConversationId,
        user_id: UserId,
        *,
        timeout: Optional[float] = None,
    ) -> Participant:
        return await self._run(
            self._leave(MarkParticipantLeftCommand(conversation_id, user_id)), timeout
        )

    async def _join(self, command: AddParticipantCommand) -> Participant:
        participant = await self._add_participant.execute(command)
        await self._advise(
            command.conversation_id,
            SystemEvent.JOIN,
            f"{command.user_id.value} joined",
        )
        return participant

    async def _leave(self, command: MarkParticipantLeftCommand) -> Participant:
        participant = await self._mark_left.execute(command)
        await self._advise(
            command.conversation_id,
            SystemEvent.LEAVE,
            f"{command.user_id.value} left",
        )
        return participant

    async def _advise(
        self, conversation_id: ConversationId, event: SystemEvent, text: str
    ) -> None:
        # Membership is authoritative, the notice is advisory
        try:
            await self._emit_system_message.execute(
                EmitSystemMessageCommand(conversation_id, event, text)
            )
        except Exception:
            logger.exception(
                f"[ChatFacade] failed to emit {event.value} system message "
                f"for conversation {conversation_id}"
            )

    # ==================== MESSAGES ====================

    async def send_message(
        self,
        conversation_id: ConversationId,
        sender_user_id: UserId,
        text: str,
        *,
        timeout: Optional[float] = None,
    ) -> Message:
        command = SendMessageCommand(conversation_id, sender_user_id, text)
        return await self._run(self._send_message.execute(command), timeout)

    async def emit_system_message(
        self,
        conversation_id: ConversationId,
        event: SystemEvent,
        text: str,
        *,
        timeout: Optional[float] = None,
    ) -> Message:
        command = EmitSystemMessageCommand(conversation_id, event, text)
        return await self._run(self._emit_system_message.execute(command), timeout)

    async def list_messages(
        self,
        conversation_id: ConversationId,
        caller_user_id: UserId,
        before: Optional[str] = None,
        limit: Any = None,
        *,
        timeout: Optional[float] = None,
    ) -> MessagePage:
        query = ListMessagesQuery(conversation_id, caller_user_id, before, limit)
        return await self._run(self._list_messages.execute(query), timeout)

    # ==================== REACTIONS ====================

    async def add_reaction(
        self,
        message_id: MessageId,
        user_id: UserId,
        emoji: Emoji,
        *,
        timeout: Optional[float] = None,
    ) -> Reaction:
        command = AddReactionCommand(message_id, user_id, emoji)
        return await self._run(self._add_reaction.execute(command), timeout)

    async def remove_reaction(
        self,
        message_id: MessageId,
        emoji: Emoji,
        user_id: UserId,
        *,
        timeout: Optional[float] = None,
    ) -> Reaction:
        command = RemoveReactionCommand(message_id, emoji, user_id)
        return await self._run(self._remove_reaction.execute(command), timeout)

    # ==================== BOOKMARKS ====================

    async def add_bookmark(
        self, message_id: MessageId, user_id: UserId, *, timeout: Optional[float] = None
    ) -> Bookmark:
        command = AddBookmarkCommand(message_id, user_id)
        return await self._run(self._add_bookmark.execute(command), timeout)

    async def remove_bookmark(
        self, message_id: MessageId, user_id: UserId, *, timeout: Optional[float] = None
    ) -> Bookmark:
        command = RemoveBookmarkCommand(message_id, user_id)
        return await self._run(self._remove_bookmark.execute(command), timeout)

    async def list_bookmarks(
        self, user_id: UserId, *, timeout: Optional[float] = None
    ) -> list[SavedMessage]:
        query = ListBookmarksQuery(user_id=user_id)
        return await self._run(self._list_bookmarks.execute(query), timeout)
