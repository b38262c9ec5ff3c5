"""Bookmark commands."""

from .add_bookmark import AddBookmarkCommand, AddBookmarkHandler
from .remove_bookmark import RemoveBookmarkCommand, RemoveBookmarkHandler

__all__ = [
    "AddBookmarkCommand",
    "AddBookmarkHandler",
    "RemoveBookmarkCommand",
    "RemoveBookmarkHandler",
]
