"""
Send Message Command - a user posts text into a conversation.

Only active participants may send. Users who left can still read the
history (see ListMessagesHandler) but not post.
"""

from dataclasses import dataclass

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.domain.entities.message import Message
from chatcore.domain.exceptions import AccessDeniedError
from chatcore.domain.ports.repositories import MessageRepository, ParticipantRepository
from chatcore.domain.value_objects.conversation_id import ConversationId
from chatcore.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class SendMessageCommand(Command[Message]):
    conversation_id: ConversationId
    sender_user_id: UserId
    text: str


class SendMessageHandler(CommandHandler[Message]):
    def __init__(
        self,
        participant_repository: ParticipantRepository,
        message_repository: MessageRepository,
    ):
        self._participant_repository = participant_repository
        self._message_repository = message_repository

    async def execute(self, command: SendMessageCommand) -> Message:
        """
        Raises:
            DomainValidationError: If the text is empty
            AccessDeniedError: If the sender is not an active participant
        """
        Message.validate_text(command.text)

        membership = await self._participant_repository.get_latest(
            command.conversation_id, command.sender_user_id
        )
        if membership is None or not membership.is_active:
            raise AccessDeniedError(
                f"User {command.sender_user_id.value} is not an active participant "
                f"of conversation {command.conversation_id.value}"
            )

        return await self._message_repository.insert(
            conversation_id=command.conversation_id,
            sender_user_id=command.sender_user_id,
            text=command.text,
        )
