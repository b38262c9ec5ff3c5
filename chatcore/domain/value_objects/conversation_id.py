"""
ConversationId Value Object - UUID wrapper for conversation identity.
"""

from dataclasses import dataclass
from uuid import UUID

from chatcore.domain.exceptions.validation_error import DomainValidationError


@dataclass(frozen=True)
class ConversationId:
    value: str  # conversation_id, presented as UUID string

    def __post_init__(self):
        if not self.value or not self._is_valid_uuid(self.value):
            raise DomainValidationError(
                f"Invalid conversation ID (UUID): {self.value!r}"
            )

    def _is_valid_uuid(self, value: str) -> bool:
        """Check if string is a valid UUID."""
        try:
            UUID(value)
            return True
        except (ValueError, TypeError, AttributeError):
            return False

    def __str__(self) -> str:
        return self.value
