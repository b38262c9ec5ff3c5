"""
MessageId Value Object - storage-assigned, monotonically increasing integer.

Together with created_at it forms the (created_at, id) ordering key.
"""

from dataclasses import dataclass

from chatcore.domain.exceptions.validation_error import DomainValidationError


@dataclass(frozen=True, order=True)
class MessageId:
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise DomainValidationError(f"Invalid message ID: {self.value!r}")
        if self.value < 1:
            raise DomainValidationError("Message ID must be positive")

    @classmethod
    def parse(cls, raw: str) -> "MessageId":
        """Build from a path/query string."""
        try:
            return cls(int(raw))
        except (TypeError, ValueError) as e:
            raise DomainValidationError(f"Invalid message ID: {raw!r}") from e

    def __str__(self) -> str:
        return str(self.value)
