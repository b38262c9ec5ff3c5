"""
Emoji Value Object - the reaction glyph (or shortcode) a user attaches.
"""

from dataclasses import dataclass

from chatcore.domain.exceptions.validation_error import DomainValidationError

MAX_EMOJI_LENGTH = 32


@dataclass(frozen=True)
class Emoji:
    value: str

    def __post_init__(self):
        if not self.value or not self.value.strip():
            raise DomainValidationError("Emoji cannot be empty")
        if len(self.value) > MAX_EMOJI_LENGTH:
            raise DomainValidationError(
                f"Emoji cannot exceed {MAX_EMOJI_LENGTH} characters"
            )

    def __str__(self) -> str:
        return self.value
