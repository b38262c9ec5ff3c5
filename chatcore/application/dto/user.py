"""User DTOs."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from chatcore.domain.entities.user import User


class UserDTO(BaseModel):
    id: str
    name: str
    avatar_url: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> UserDTO:
        return cls(
            id=user.id.value,
            name=user.name,
            avatar_url=user.avatar_url,
            created_at=user.created_at,
        )
