"""Message queries."""

from chatcore.application.queries.messages.list_messages import (
    ListMessagesQuery,
    ListMessagesHandler,
    MessagePage,
)

__all__ = [
    "ListMessagesQuery",
    "ListMessagesHandler",
    "MessagePage",
]
