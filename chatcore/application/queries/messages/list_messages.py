"""
ListMessages Query - one newest-first page of a conversation's timeline.

Cursor pagination instead of offsets: `before` is the opaque cursor of the
last message of the previous page, so pages stay stable while new
messages arrive.
"""

from dataclasses import dataclass
from typing import Any, Optional

from chatcore.application.common.interfaces import Query, QueryHandler
from chatcore.config.settings import Config
from chatcore.domain.entities.message import Message
from chatcore.domain.exceptions import AccessDeniedError
from chatcore.domain.ports.repositories import MessageRepository, ParticipantRepository
from chatcore.domain.services.pagination import resolve_page_limit
from chatcore.domain.value_objects.conversation_id import ConversationId
from chatcore.domain.value_objects.message_cursor import MessageCursor
from chatcore.domain.value_objects.user_id import UserId


@dataclass
class MessagePage:
    """Messages ordered (created_at desc, id desc) plus the cursor for the next page."""

    messages: list[Message]
    next_cursor: Optional[str] = None


@dataclass(frozen=True)
class ListMessagesQuery(Query[MessagePage]):
    conversation_id: ConversationId
    caller_user_id: UserId
    before: Optional[str] = None
    # Raw caller input; anything unusable falls back to the default
    limit: Any = None


class ListMessagesHandler(QueryHandler[MessagePage]):
    def __init__(
        self,
        participant_repository: ParticipantRepository,
        message_repository: MessageRepository,
        default_limit: int = Config.MESSAGE_PAGE_DEFAULT_LIMIT,
        max_limit: int = Config.MESSAGE_PAGE_MAX_LIMIT,
    ):
        self._participant_repository = participant_repository
        self._message_repository = message_repository
        self._default_limit = default_limit
        self._max_limit = max_limit

    async def execute(self, query: ListMessagesQuery) -> MessagePage:
        """
        Steps:
        1. Decode the cursor (malformed → DomainValidationError)
        2. Verify the caller has, or had, a membership row
        3. Load one page from storage

        Raises:
            DomainValidationError: If `before` is not a valid cursor
            AccessDeniedError: If the caller was never a participant
        """
        before = MessageCursor.decode(query.before) if query.before else None
        limit = resolve_page_limit(query.limit, self._default_limit, self._max_limit)

        # History stays visible after leaving
        membership = await self._participant_repository.get_latest(
            query.conversation_id, query.caller_user_id
        )
        if membership is None:
            raise AccessDeniedError("You don't have access to this conversation")

        messages = await self._message_repository.query_page(
            query.conversation_id, before, limit
        )

        next_cursor = None
        if len(messages) == limit:
            next_cursor = MessageCursor.from_message(messages[-1]).encode()

        return MessagePage(messages=messages, next_cursor=next_cursor)
