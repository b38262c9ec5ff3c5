"""
InMemoryChatStore - process-local tables backing the in-memory repositories.

All repositories built on one store see the same data. Repository methods
never await between reading and writing these tables, so every port call
is atomic on the event loop, which is what gives the uniqueness checks
their insert-or-conflict semantics.
"""

from datetime import datetime, timezone
from itertools import count
from typing import Callable, Optional

from chatcore.domain.entities import (
    Bookmark,
    Conversation,
    Message,
    Participant,
    Reaction,
    User,
)
from chatcore.domain.exceptions import StorageUnavailableError


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryChatStore:
    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self.clock = clock or utc_now
        # Flip to False to simulate a lost connection
        self.available = True

        self.conversations: dict[str, Conversation] = {}
        # Append-only membership log; leaving replaces the row in place
        self.participants: list[Participant] = []
        self.messages: dict[int, Message] = {}
        self.reactions: dict[tuple[int, str, str], Reaction] = {}
        self.bookmarks: dict[tuple[int, str], Bookmark] = {}
        self.users: dict[str, User] = {}

        self._message_ids = count(1)

    def next_message_id(self) -> int:
        return next(self._message_ids)

    def ensure_available(self) -> None:
        if not self.available:
            raise StorageUnavailableError("In-memory store is marked unavailable")
