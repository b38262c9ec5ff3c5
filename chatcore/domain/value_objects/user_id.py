"""
UserId Value Object
"""

from dataclasses import dataclass
from uuid import UUID

from chatcore.domain.exceptions.validation_error import DomainValidationError


@dataclass(frozen=True)
class UserId:
    value: str  # user_id

    def __post_init__(self):
        if not self.value:
            raise DomainValidationError("UserId cannot be empty")

        try:
            UUID(self.value)
        except (ValueError, TypeError, AttributeError) as e:
            raise DomainValidationError(f"Invalid user ID (UUID): {self.value!r}") from e

    def __str__(self) -> str:
        return self.value
