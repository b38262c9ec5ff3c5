"""Reaction commands."""

from .add_reaction import AddReactionCommand, AddReactionHandler
from .remove_reaction import RemoveReactionCommand, RemoveReactionHandler

__all__ = [
    "AddReactionCommand",
    "AddReactionHandler",
    "RemoveReactionCommand",
    "RemoveReactionHandler",
]
