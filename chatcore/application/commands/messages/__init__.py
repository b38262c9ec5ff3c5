"""Message commands."""

from .send_message import SendMessageCommand, SendMessageHandler
from .emit_system_message import EmitSystemMessageCommand, EmitSystemMessageHandler

__all__ = [
    "SendMessageCommand",
    "SendMessageHandler",
    "EmitSystemMessageCommand",
    "EmitSystemMessageHandler",
]
