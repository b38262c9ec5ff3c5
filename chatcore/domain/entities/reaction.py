"""
Reaction Entity - unique per (message, user, emoji).
"""

from dataclasses import dataclass
from datetime import datetime

from chatcore.domain.value_objects.emoji import Emoji
from chatcore.domain.value_objects.message_id import MessageId
from chatcore.domain.value_objects.user_id import UserId


@dataclass
class Reaction:
    message_id: MessageId
    user_id: UserId
    emoji: Emoji
    created_at: datetime
