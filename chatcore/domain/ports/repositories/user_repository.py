"""
User Repository Port - Interface for user persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional

from chatcore.domain.entities.user import User
from chatcore.domain.value_objects.user_id import UserId


class UserRepository(ABC):
    @abstractmethod
    async def create(self, name: str, avatar_url: Optional[str] = None) -> User: ...

    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]: ...

    @abstractmethod
    async def list_all(self) -> list[User]: ...
