"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Does NOT specify implementation (Prisma, in-memory, etc.)

Contract shared by every implementation:
- Each method is a single all-or-nothing storage call
- Uniqueness violations surface as ConflictError (never read-then-write)
- Connectivity failures surface as StorageUnavailableError

Infrastructure layer provides implementations.
"""

from chatcore.domain.ports.repositories.conversation_repository import ConversationRepository
from chatcore.domain.ports.repositories.participant_repository import ParticipantRepository
from chatcore.domain.ports.repositories.message_repository import MessageRepository
from chatcore.domain.ports.repositories.reaction_repository import ReactionRepository
from chatcore.domain.ports.repositories.bookmark_repository import BookmarkRepository
from chatcore.domain.ports.repositories.user_repository import UserRepository

__all__ = [
    "ConversationRepository",
    "ParticipantRepository",
    "MessageRepository",
    "ReactionRepository",
    "BookmarkRepository",
    "UserRepository",
]
