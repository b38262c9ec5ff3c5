"""Mark Participant Left Command (soft removal)."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.domain.entities.participant import Participant
from chatcore.domain.exceptions import EntityNotFoundError
from chatcore.domain.ports.repositories import ParticipantRepository
from chatcore.domain.value_objects.conversation_id import ConversationId
from chatcore.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarkParticipantLeftCommand(Command[Participant]):
    conversation_id: ConversationId
    user_id: UserId


class MarkParticipantLeftHandler(CommandHandler[Participant]):
    def __init__(self, participant_repository: ParticipantRepository):
        self._participant_repository = participant_repository

    async def execute(self, command: MarkParticipantLeftCommand) -> Participant:
        """
        Set left_at on the user's active row. Leaving twice is rejected.

        Raises:
            EntityNotFoundError: If the user has no active row in the conversation
        """
        participant = await self._participant_repository.set_left(
            command.conversation_id,
            command.user_id,
            datetime.now(timezone.utc),
        )
        if participant is None:
            raise EntityNotFoundError(
                f"User {command.user_id.value} is not an active participant "
                f"of conversation {command.conversation_id.value}"
            )
        logger.info(
            f"[MarkParticipantLeft] user {command.user_id} left "
            f"conversation {command.conversation_id}"
        )
        return participant
