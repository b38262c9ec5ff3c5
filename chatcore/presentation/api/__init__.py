"""
API Routers - FastAPI endpoint definitions.
"""

from chatcore.presentation.api.conversations import router as conversations_router
from chatcore.presentation.api.messages import router as messages_router
from chatcore.presentation.api.users import router as users_router

__all__ = [
    "conversations_router",
    "messages_router",
    "users_router",
]
