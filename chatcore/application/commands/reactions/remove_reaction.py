"""Remove Reaction Command."""

from dataclasses import dataclass

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.domain.entities.reaction import Reaction
from chatcore.domain.exceptions import EntityNotFoundError
from chatcore.domain.ports.repositories import ReactionRepository
from chatcore.domain.value_objects.emoji import Emoji
from chatcore.domain.value_objects.message_id import MessageId
from chatcore.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class RemoveReactionCommand(Command[Reaction]):
    message_id: MessageId
    emoji: Emoji
    user_id: UserId


class RemoveReactionHandler(CommandHandler[Reaction]):
    def __init__(self, reaction_repository: ReactionRepository):
        self._reaction_repository = reaction_repository

    async def execute(self, command: RemoveReactionCommand) -> Reaction:
        removed = await self._reaction_repository.delete(
            command.message_id, command.user_id, command.emoji
        )
        if removed is None:
            raise EntityNotFoundError(
                f"Reaction {command.emoji.value} by user {command.user_id.value} "
                f"on message {command.message_id.value} not found"
            )
        return removed
