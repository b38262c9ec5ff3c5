"""Remove Bookmark Command."""

from dataclasses import dataclass

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.domain.entities.bookmark import Bookmark
from chatcore.domain.exceptions import EntityNotFoundError
from chatcore.domain.ports.repositories import BookmarkRepository
from chatcore.domain.value_objects.message_id import MessageId
from chatcore.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class RemoveBookmarkCommand(Command[Bookmark]):
    message_id: MessageId
    user_id: UserId


class RemoveBookmarkHandler(CommandHandler[Bookmark]):
    def __init__(self, bookmark_repository: BookmarkRepository):
        self._bookmark_repository = bookmark_repository

    async def execute(self, command: RemoveBookmarkCommand) -> Bookmark:
        removed = await self._bookmark_repository.delete(
            command.message_id, command.user_id
        )
        if removed is None:
            raise EntityNotFoundError(
                f"Message {command.message_id.value} is not bookmarked "
                f"by user {command.user_id.value}"
            )
        return removed
