"""Conversation-related queries."""

from chatcore.application.queries.conversations.get_conversation import (
    GetConversationQuery,
    GetConversationHandler,
)
from chatcore.application.queries.conversations.list_conversations import (
    ListConversationsQuery,
    ListConversationsHandler,
)

__all__ = [
    "GetConversationQuery",
    "GetConversationHandler",
    "ListConversationsQuery",
    "ListConversationsHandler",
]
