"""
In-memory storage adapters.

Used for local development (STORAGE_BACKEND=memory) and the test suite.
"""

from chatcore.infrastructure.persistence.memory.store import InMemoryChatStore
from chatcore.infrastructure.persistence.memory.repositories import (
    InMemoryBookmarkRepository,
    InMemoryConversationRepository,
    InMemoryMessageRepository,
    InMemoryParticipantRepository,
    InMemoryReactionRepository,
    InMemoryUserRepository,
)

__all__ = [
    "InMemoryChatStore",
    "InMemoryConversationRepository",
    "InMemoryParticipantRepository",
    "InMemoryMessageRepository",
    "InMemoryReactionRepository",
    "InMemoryBookmarkRepository",
    "InMemoryUserRepository",
]
