"""
MessageCursor Value Object - opaque pagination position.

Encodes the (created_at, id) ordering key of the last message of a page.
Clients receive it as a URL-safe token and hand it back as `before`.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from chatcore.domain.exceptions.validation_error import DomainValidationError
from chatcore.domain.value_objects.message_id import MessageId

if TYPE_CHECKING:
    from chatcore.domain.entities.message import Message

_SEPARATOR = "|"


@dataclass(frozen=True)
class MessageCursor:
    created_at: datetime
    message_id: MessageId

    @classmethod
    def from_message(cls, message: Message) -> MessageCursor:
        return cls(created_at=message.created_at, message_id=message.id)

    def encode(self) -> str:
        raw = f"{self.created_at.isoformat()}{_SEPARATOR}{self.message_id.value}"
        return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("ascii").rstrip("=")

    @classmethod
    def decode(cls, token: str) -> MessageCursor:
        """Parse a token produced by encode(); raises DomainValidationError otherwise."""
        try:
            padded = token + "=" * (-len(token) % 4)
            raw = base64.urlsafe_b64decode(padded.encode("ascii")).decode("utf-8")
            created_raw, id_raw = raw.rsplit(_SEPARATOR, 1)
            created_at = datetime.fromisoformat(created_raw)
            # Stored timestamps are aware; a naive one cannot be ordered against them
            if created_at.tzinfo is None:
                raise ValueError("cursor timestamp has no timezone")
            return cls(
                created_at=created_at,
                message_id=MessageId(int(id_raw)),
            )
        except (ValueError, TypeError) as e:
            # binascii.Error and UnicodeDecodeError are ValueErrors
            raise DomainValidationError("Invalid pagination cursor") from e

    def is_after(self, message: Message) -> bool:
        """True when `message` sorts strictly older than this position."""
        return (message.created_at, message.id.value) < (
            self.created_at,
            self.message_id.value,
        )
