"""
DomainValidationError - Raised for malformed or contradictory input.
Maps to: HTTP 400 Bad Request

Subclasses ValueError so value objects keep the usual
"invalid value raises ValueError" contract.
"""


class DomainValidationError(ValueError):
    """Exception raised for domain validation errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
