"""List Users Query."""

from dataclasses import dataclass

from chatcore.application.common.interfaces import Query, QueryHandler
from chatcore.domain.entities.user import User
from chatcore.domain.ports.repositories import UserRepository


@dataclass(frozen=True)
class ListUsersQuery(Query[list[User]]):
    pass


class ListUsersHandler(QueryHandler[list[User]]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: ListUsersQuery) -> list[User]:
        return await self._user_repository.list_all()
