"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from chatcore.domain.value_objects.user_id import UserId
from chatcore.domain.value_objects.conversation_id import ConversationId
from chatcore.domain.value_objects.message_id import MessageId
from chatcore.domain.value_objects.emoji import Emoji
from chatcore.domain.value_objects.message_cursor import MessageCursor

__all__ = [
    "UserId",
    "ConversationId",
    "MessageId",
    "Emoji",
    "MessageCursor",
]
