"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from chatcore.domain.entities.conversation import Conversation, ConversationKind
from chatcore.domain.entities.participant import Participant, ParticipantRole
from chatcore.domain.entities.message import Message, SystemEvent
from chatcore.domain.entities.reaction import Reaction
from chatcore.domain.entities.bookmark import Bookmark, SavedMessage
from chatcore.domain.entities.user import User

__all__ = [
    "Conversation",
    "ConversationKind",
    "Participant",
    "ParticipantRole",
    "Message",
    "SystemEvent",
    "Reaction",
    "Bookmark",
    "SavedMessage",
    "User",
]
