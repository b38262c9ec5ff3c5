"""
ConflictError - Raised on uniqueness or state-transition violations
(duplicate reaction, duplicate bookmark, user already an active participant).
Maps to: HTTP 409 Conflict
"""


class ConflictError(Exception):
    """Exception raised when the write would violate a uniqueness rule."""

    def __init__(self, message: str = "The resource already exists."):
        super().__init__(message)
        self.message = message
