"""Emit System Message Command - membership notices with no human sender."""

from dataclasses import dataclass

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.domain.entities.message import Message, SystemEvent
from chatcore.domain.ports.repositories import MessageRepository
from chatcore.domain.value_objects.conversation_id import ConversationId


@dataclass(frozen=True)
class EmitSystemMessageCommand(Command[Message]):
    conversation_id: ConversationId
    system_event: SystemEvent
    text: str


class EmitSystemMessageHandler(CommandHandler[Message]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, command: EmitSystemMessageCommand) -> Message:
        # System-originated: no participant check
        Message.validate_text(command.text)
        return await self._message_repository.insert(
            conversation_id=command.conversation_id,
            sender_user_id=None,
            text=command.text,
            system_event=command.system_event,
        )
