"""
Bookmark Entity - a user's saved message, unique per (message, user).
"""

from dataclasses import dataclass
from datetime import datetime

from chatcore.domain.value_objects.conversation_id import ConversationId
from chatcore.domain.value_objects.message_id import MessageId
from chatcore.domain.value_objects.user_id import UserId


@dataclass
class Bookmark:
    message_id: MessageId
    user_id: UserId
    created_at: datetime


@dataclass
class SavedMessage:
    """Bookmark joined with the minimal message context for a saved-messages view."""

    bookmark: Bookmark
    conversation_id: ConversationId
    text: str
    message_created_at: datetime

    @property
    def message_id(self) -> MessageId:
        return self.bookmark.message_id
