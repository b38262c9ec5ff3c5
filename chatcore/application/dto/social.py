"""Reaction and bookmark DTOs."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from chatcore.domain.entities.bookmark import Bookmark, SavedMessage
from chatcore.domain.entities.reaction import Reaction


class ReactionDTO(BaseModel):
    message_id: int
    user_id: str
    emoji: str
    created_at: datetime

    @classmethod
    def from_entity(cls, reaction: Reaction) -> ReactionDTO:
        return cls(
            message_id=reaction.message_id.value,
            user_id=reaction.user_id.value,
            emoji=reaction.emoji.value,
            created_at=reaction.created_at,
        )


class BookmarkDTO(BaseModel):
    message_id: int
    user_id: str
    created_at: datetime

    @classmethod
    def from_entity(cls, bookmark: Bookmark) -> BookmarkDTO:
        return cls(
            message_id=bookmark.message_id.value,
            user_id=bookmark.user_id.value,
            created_at=bookmark.created_at,
        )


class SavedMessageDTO(BaseModel):
    message_id: int
    conversation_id: str
    text: str
    message_created_at: datetime
    bookmarked_at: datetime

    @classmethod
    def from_entity(cls, saved: SavedMessage) -> SavedMessageDTO:
        return cls(
            message_id=saved.message_id.value,
            conversation_id=saved.conversation_id.value,
            text=saved.text,
            message_created_at=saved.message_created_at,
            bookmarked_at=saved.bookmark.created_at,
        )
