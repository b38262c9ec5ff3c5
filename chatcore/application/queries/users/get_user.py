"""Get User Query."""

from dataclasses import dataclass

from chatcore.application.common.interfaces import Query, QueryHandler
from chatcore.domain.entities.user import User
from chatcore.domain.exceptions import EntityNotFoundError
from chatcore.domain.ports.repositories import UserRepository
from chatcore.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class GetUserQuery(Query[User]):
    user_id: UserId


class GetUserHandler(QueryHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: GetUserQuery) -> User:
        user = await self._user_repository.get_by_id(query.user_id)
        if not user:
            raise EntityNotFoundError(f"User {query.user_id.value} not found")
        return user
