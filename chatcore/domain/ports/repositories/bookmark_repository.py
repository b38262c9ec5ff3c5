"""
Bookmark Repository Port - Interface for bookmark persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional

from chatcore.domain.entities.bookmark import Bookmark, SavedMessage
from chatcore.domain.value_objects.message_id import MessageId
from chatcore.domain.value_objects.user_id import UserId


class BookmarkRepository(ABC):
    @abstractmethod
    async def insert(self, message_id: MessageId, user_id: UserId) -> Bookmark:
        """
        Raises:
            ConflictError: If the user already bookmarked the message
        """
        ...

    @abstractmethod
    async def delete(
        self, message_id: MessageId, user_id: UserId
    ) -> Optional[Bookmark]: ...

    @abstractmethod
    async def list_for_user(self, user_id: UserId) -> list[SavedMessage]:
        """Bookmarks joined with their message, newest bookmark first."""
        ...
