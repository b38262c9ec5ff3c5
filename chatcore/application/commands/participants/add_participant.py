"""Add Participant Command."""

import logging
from dataclasses import dataclass

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.domain.entities.conversation import ConversationKind
from chatcore.domain.entities.participant import Participant, ParticipantRole
from chatcore.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from chatcore.domain.ports.repositories import (
    ConversationRepository,
    ParticipantRepository,
)
from chatcore.domain.value_objects.conversation_id import ConversationId
from chatcore.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddParticipantCommand(Command[Participant]):
    conversation_id: ConversationId
    user_id: UserId
    caller_user_id: UserId
    role: ParticipantRole = ParticipantRole.MEMBER


class AddParticipantHandler(CommandHandler[Participant]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        participant_repository: ParticipantRepository,
    ):
        self._conversation_repository = conversation_repository
        self._participant_repository = participant_repository

    async def execute(self, command: AddParticipantCommand) -> Participant:
        """
        Raises:
            EntityNotFoundError: If the conversation doesn't exist
            AccessDeniedError: If the caller is not an active participant
            DomainValidationError: If the conversation is direct (fixed at creation)
            ConflictError: If the user is already an active participant
        """
        conversation = await self._conversation_repository.get_by_id(
            command.conversation_id
        )
        if not conversation:
            raise EntityNotFoundError(
                f"Conversation {command.conversation_id.value} not found"
            )

        caller = await self._participant_repository.get_latest(
            command.conversation_id, command.caller_user_id
        )
        if caller is None or not caller.is_active:
            raise AccessDeniedError(
                f"User {command.caller_user_id.value} is not an active participant "
                f"of conversation {command.conversation_id.value}"
            )

        if conversation.kind == ConversationKind.DIRECT:
            raise DomainValidationError(
                "Participants cannot be added to a direct conversation"
            )

        # Uniqueness is enforced by the insert itself, not a prior read
        participant = await self._participant_repository.insert(
            command.conversation_id, command.user_id, command.role
        )
        logger.info(
            f"[AddParticipant] user {command.user_id} joined "
            f"conversation {command.conversation_id} as {command.role.value}"
        )
        return participant
