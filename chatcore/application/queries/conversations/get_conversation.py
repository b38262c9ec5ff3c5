"""Get Conversation Query - conversation plus its full membership history."""

from dataclasses import dataclass, replace

from chatcore.application.common.interfaces import Query, QueryHandler
from chatcore.domain.entities.conversation import Conversation
from chatcore.domain.exceptions import EntityNotFoundError
from chatcore.domain.ports.repositories import (
    ConversationRepository,
    ParticipantRepository,
)
from chatcore.domain.value_objects.conversation_id import ConversationId


@dataclass(frozen=True)
class GetConversationQuery(Query[Conversation]):
    conversation_id: ConversationId


class GetConversationHandler(QueryHandler[Conversation]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        participant_repository: ParticipantRepository,
    ):
        self._conversation_repository = conversation_repository
        self._participant_repository = participant_repository

    async def execute(self, query: GetConversationQuery) -> Conversation:
        conversation = await self._conversation_repository.get_by_id(
            query.conversation_id
        )
        if not conversation:
            raise EntityNotFoundError(
                f"Conversation {query.conversation_id.value} not found"
            )
        # Rows of users who left stay in the list with left_at set
        participants = await self._participant_repository.list_by_conversation(
            query.conversation_id
        )
        return replace(conversation, participants=participants)
