"""
User Entity - a chat account.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from chatcore.domain.exceptions.validation_error import DomainValidationError
from chatcore.domain.value_objects.user_id import UserId

MAX_NAME_LENGTH = 100


@dataclass
class User:
    # Required fields (no defaults) - must come first
    id: UserId
    name: str
    created_at: datetime
    # Optional fields (with defaults) - must come last
    avatar_url: Optional[str] = None

    @staticmethod
    def validate_name(name: str) -> None:
        if not name or not name.strip():
            raise DomainValidationError("User name cannot be empty")
        if len(name) > MAX_NAME_LENGTH:
            raise DomainValidationError(
                f"User name cannot exceed {MAX_NAME_LENGTH} characters"
            )
