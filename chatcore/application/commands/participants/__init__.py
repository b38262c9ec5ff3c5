"""Participant commands."""

from .add_participant import AddParticipantCommand, AddParticipantHandler
from .mark_participant_left import (
    MarkParticipantLeftCommand,
    MarkParticipantLeftHandler,
)

__all__ = [
    "AddParticipantCommand",
    "AddParticipantHandler",
    "MarkParticipantLeftCommand",
    "MarkParticipantLeftHandler",
]
