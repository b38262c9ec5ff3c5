"""Create User Command."""

from dataclasses import dataclass
from typing import Optional

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.domain.entities.user import User
from chatcore.domain.ports.repositories import UserRepository


@dataclass(frozen=True)
class CreateUserCommand(Command[User]):
    name: str
    avatar_url: Optional[str] = None


class CreateUserHandler(CommandHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, command: CreateUserCommand) -> User:
        User.validate_name(command.name)
        return await self._user_repository.create(
            name=command.name.strip(), avatar_url=command.avatar_url or None
        )
