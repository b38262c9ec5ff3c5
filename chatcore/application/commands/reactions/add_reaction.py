"""Add Reaction Command."""

from dataclasses import dataclass

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.domain.entities.reaction import Reaction
from chatcore.domain.exceptions import AccessDeniedError, EntityNotFoundError
from chatcore.domain.ports.repositories import (
    MessageRepository,
    ReactionRepository,
    ParticipantRepository,
)
from chatcore.domain.value_objects.emoji import Emoji
from chatcore.domain.value_objects.message_id import MessageId
from chatcore.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class AddReactionCommand(Command[Reaction]):
    message_id: MessageId
    user_id: UserId
    emoji: Emoji


class AddReactionHandler(CommandHandler[Reaction]):
    def __init__(
        self,
        message_repository: MessageRepository,
        reaction_repository: ReactionRepository,
        participant_repository: ParticipantRepository,
    ):
        self._message_repository = message_repository
        self._reaction_repository = reaction_repository
        self._participant_repository = participant_repository

    async def execute(self, command: AddReactionCommand) -> Reaction:
        """
        Raises:
            EntityNotFoundError: If the message doesn't exist
            AccessDeniedError: If the user was never a participant of the
                message's conversation
            ConflictError: If the user already reacted with this emoji
                (duplicates are rejected, never merged)
        """
        message = await self._message_repository.get_by_id(command.message_id)
        if not message:
            raise EntityNotFoundError(f"Message {command.message_id.value} not found")

        # Past members keep access to the history they saw
        membership = await self._participant_repository.get_latest(
            message.conversation_id, command.user_id
        )
        if membership is None:
            raise AccessDeniedError("You don't have access to this conversation")

        return await self._reaction_repository.insert(
            command.message_id, command.user_id, command.emoji
        )
