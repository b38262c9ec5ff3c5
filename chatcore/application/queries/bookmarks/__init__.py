"""Bookmark queries."""

from chatcore.application.queries.bookmarks.list_bookmarks import (
    ListBookmarksQuery,
    ListBookmarksHandler,
)

__all__ = [
    "ListBookmarksQuery",
    "ListBookmarksHandler",
]
