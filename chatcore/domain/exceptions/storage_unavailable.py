"""
StorageUnavailableError - Raised when the storage layer cannot serve the call
(connection loss, deadline exceeded). Callers may retry with backoff.
Maps to: HTTP 503 Service Unavailable
"""


class StorageUnavailableError(Exception):
    """Exception raised when persistence is unreachable."""

    def __init__(self, message: str = "Storage is unavailable."):
        super().__init__(message)
        self.message = message
