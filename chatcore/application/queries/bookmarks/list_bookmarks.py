"""List Bookmarks Query - the "my saved messages" view."""

from dataclasses import dataclass

from chatcore.application.common.interfaces import Query, QueryHandler
from chatcore.domain.entities.bookmark import SavedMessage
from chatcore.domain.ports.repositories import BookmarkRepository
from chatcore.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ListBookmarksQuery(Query[list[SavedMessage]]):
    user_id: UserId


class ListBookmarksHandler(QueryHandler[list[SavedMessage]]):
    def __init__(self, bookmark_repository: BookmarkRepository):
        self._bookmark_repository = bookmark_repository

    async def execute(self, query: ListBookmarksQuery) -> list[SavedMessage]:
        return await self._bookmark_repository.list_for_user(query.user_id)
