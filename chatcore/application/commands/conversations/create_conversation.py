"""
Create Conversation Command.

Validates the direct/group shape rules, then hands the conversation and
its initial members to storage as ONE call, so no half-created
conversation (zero participants) is ever observable.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.domain.entities.conversation import Conversation, ConversationKind
from chatcore.domain.ports.repositories import ConversationRepository
from chatcore.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateConversationCommand(Command[Conversation]):
    kind: ConversationKind
    participant_user_ids: tuple[UserId, ...] = field(default_factory=tuple)
    name: Optional[str] = None


class CreateConversationHandler(CommandHandler[Conversation]):
    _conversation_repository: ConversationRepository

    def __init__(self, conversation_repository: ConversationRepository):
        self._conversation_repository = conversation_repository

    async def execute(self, command: CreateConversationCommand) -> Conversation:
        user_ids = Conversation.validate_new(
            command.kind, command.name, command.participant_user_ids
        )
        conversation = await self._conversation_repository.create_with_participants(
            kind=command.kind,
            name=command.name,
            user_ids=user_ids,
        )
        logger.info(
            f"[CreateConversation] {conversation.kind.value} conversation "
            f"{conversation.id} created with {len(user_ids)} participants"
        )
        return conversation
