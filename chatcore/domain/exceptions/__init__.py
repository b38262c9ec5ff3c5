"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic, application handlers and
storage adapters, and caught by the presentation layer.
Presentation layer maps them to HTTP status codes.
"""

from chatcore.domain.exceptions.entity_not_found import EntityNotFoundError
from chatcore.domain.exceptions.access_denied import AccessDeniedError
from chatcore.domain.exceptions.validation_error import DomainValidationError
from chatcore.domain.exceptions.conflict import ConflictError
from chatcore.domain.exceptions.storage_unavailable import StorageUnavailableError

__all__ = [
    "EntityNotFoundError",
    "AccessDeniedError",
    "DomainValidationError",
    "ConflictError",
    "StorageUnavailableError",
]
