"""
AccessDeniedError - Raised when the caller lacks the participant relationship
an operation requires.
Maps to: HTTP 403 Forbidden
"""


class AccessDeniedError(Exception):
    """Raised when user is not (or was never) a participant of the conversation"""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)
        self.message = message
