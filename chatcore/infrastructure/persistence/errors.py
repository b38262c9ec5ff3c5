"""
Translation of Prisma client errors into domain exceptions.

Adapters wrap each storage call in `translate_prisma_errors(...)`, so
the application layer only ever sees ConflictError or
StorageUnavailableError, never a driver-specific exception.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from prisma.engine.errors import EngineConnectionError
from prisma.errors import (
    ClientNotConnectedError,
    UniqueViolationError,
)

from chatcore.domain.exceptions import ConflictError, StorageUnavailableError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def translate_prisma_errors(conflict_message: str = "") -> AsyncIterator[None]:
    try:
        yield
    except UniqueViolationError as e:
        raise ConflictError(conflict_message or "Unique constraint violated") from e
    except (
        ClientNotConnectedError,
        EngineConnectionError,
    ) as e:
        logger.warning(f"[Prisma] storage unavailable: {e}")
        raise StorageUnavailableError(f"Database unavailable: {e}") from e
