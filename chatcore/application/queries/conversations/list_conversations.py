"""List Conversations Query."""

from dataclasses import dataclass
from chatcore.domain.ports.repositories.conversation_repository import (
    ConversationRepository,
)
from chatcore.application.common.interfaces import Query, QueryHandler
from chatcore.domain.entities.conversation import Conversation
from chatcore.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ListConversationsQuery(Query[list[Conversation]]):
    user_id: UserId


class ListConversationsHandler(QueryHandler[list[Conversation]]):
    def __init__(self, conversation_repository: ConversationRepository):
        self._conversation_repository = conversation_repository

    async def execute(self, query: ListConversationsQuery) -> list[Conversation]:
        # Active memberships only, most recently active first
        return await self._conversation_repository.list_for_user(query.user_id)
