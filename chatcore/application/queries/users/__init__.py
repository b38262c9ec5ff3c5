"""User queries."""

from chatcore.application.queries.users.get_user import GetUserQuery, GetUserHandler
from chatcore.application.queries.users.list_users import ListUsersQuery, ListUsersHandler

__all__ = [
    "GetUserQuery",
    "GetUserHandler",
    "ListUsersQuery",
    "ListUsersHandler",
]
