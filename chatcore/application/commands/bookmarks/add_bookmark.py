"""Add Bookmark Command."""

from dataclasses import dataclass

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.domain.entities.bookmark import Bookmark
from chatcore.domain.exceptions import AccessDeniedError, EntityNotFoundError
from chatcore.domain.ports.repositories import (
    BookmarkRepository,
    MessageRepository,
    ParticipantRepository,
)
from chatcore.domain.value_objects.message_id import MessageId
from chatcore.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class AddBookmarkCommand(Command[Bookmark]):
    message_id: MessageId
    user_id: UserId


class AddBookmarkHandler(CommandHandler[Bookmark]):
    def __init__(
        self,
        message_repository: MessageRepository,
        bookmark_repository: BookmarkRepository,
        participant_repository: ParticipantRepository,
    ):
        self._message_repository = message_repository
        self._bookmark_repository = bookmark_repository
        self._participant_repository = participant_repository

    async def execute(self, command: AddBookmarkCommand) -> Bookmark:
        """
        Raises:
            EntityNotFoundError: If the message doesn't exist
            AccessDeniedError: If the user was never a participant of the
                message's conversation
            ConflictError: If the user already bookmarked it
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

        return await self._bookmark_repository.insert(command.message_id, command.user_id)
