"""
Dishka DI Container Setup.

- Registers all dependencies (repositories, handlers, facade)
- Maps abstract repository ports to the configured storage backend
- Manages lifecycle (APP = singleton, REQUEST = per-request)

Storage providers:
- InMemoryStorageProvider: one InMemoryChatStore for the app lifetime
- PrismaStorageProvider (prisma_provider.py): connected Prisma client,
  imported only when STORAGE_BACKEND=prisma

Flow:
  Container → provides → InMemoryMessageRepository → to → ChatFacade
                                    ↓
                            uses MessageRepository interface
"""

from typing import Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from chatcore.application.commands.users import CreateUserHandler
from chatcore.application.queries.users import GetUserHandler, ListUsersHandler
from chatcore.application.services.chat_facade import ChatFacade
from chatcore.config.settings import Config
from chatcore.domain.ports.repositories import (
    BookmarkRepository,
    ConversationRepository,
    MessageRepository,
    ParticipantRepository,
    ReactionRepository,
    UserRepository,
)
from chatcore.infrastructure.persistence.memory import (
    InMemoryBookmarkRepository,
    InMemoryChatStore,
    InMemoryConversationRepository,
    InMemoryMessageRepository,
    InMemoryParticipantRepository,
    InMemoryReactionRepository,
    InMemoryUserRepository,
)


class InMemoryStorageProvider(Provider):
    """
    Repository ports backed by a single in-process store.

    Pass `store` to share a pre-built store (tests seed and inspect it).
    """

    def __init__(self, store: Optional[InMemoryChatStore] = None):
        super().__init__()
        self._store = store

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryChatStore:
        return self._store if self._store is not None else InMemoryChatStore()

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_conversation_repository(
        self, store: InMemoryChatStore
    ) -> ConversationRepository:
        """
        Provide ConversationRepository implementation.

        - Return type is ABSTRACT (ConversationRepository)
        - Implementation is CONCRETE (InMemoryConversationRepository)
        """
        return InMemoryConversationRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_participant_repository(
        self, store: InMemoryChatStore
    ) -> ParticipantRepository:
        return InMemoryParticipantRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, store: InMemoryChatStore) -> MessageRepository:
        return InMemoryMessageRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_reaction_repository(self, store: InMemoryChatStore) -> ReactionRepository:
        return InMemoryReactionRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_bookmark_repository(self, store: InMemoryChatStore) -> BookmarkRepository:
        return InMemoryBookmarkRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryChatStore) -> UserRepository:
        return InMemoryUserRepository(store)


class AppProvider(Provider):
    """
    Application dependency provider.

    Everything here depends only on the abstract repository ports, so it
    works with whichever storage provider the container was built with.
    """

    # ==================== FACADE ====================

    @provide(scope=Scope.REQUEST)
    def get_chat_facade(
        self,
        conversation_repository: ConversationRepository,
        participant_repository: ParticipantRepository,
        message_repository: MessageRepository,
        reaction_repository: ReactionRepository,
        bookmark_repository: BookmarkRepository,
    ) -> ChatFacade:
        return ChatFacade(
            conversation_repository,
            participant_repository,
            message_repository,
            reaction_repository,
            bookmark_repository,
            default_page_limit=Config.MESSAGE_PAGE_DEFAULT_LIMIT,
            max_page_limit=Config.MESSAGE_PAGE_MAX_LIMIT,
        )

    # ==================== USER HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_user_handler(
        self, user_repository: UserRepository
    ) -> CreateUserHandler:
        return CreateUserHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_user_handler(self, user_repository: UserRepository) -> GetUserHandler:
        return GetUserHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_users_handler(
        self, user_repository: UserRepository
    ) -> ListUsersHandler:
        return ListUsersHandler(user_repository)


def create_container(
    backend: Optional[str] = None,
    store: Optional[InMemoryChatStore] = None,
) -> AsyncContainer:
    """
    Create and configure the DI container.

    - backend defaults to Config.STORAGE_BACKEND
    - Call this ONCE at app startup
    """
    backend = (backend or Config.STORAGE_BACKEND).lower()
    if backend == "prisma":
        from chatcore.setup.ioc.prisma_provider import PrismaStorageProvider

        storage: Provider = PrismaStorageProvider()
    elif backend == "memory":
        storage = InMemoryStorageProvider(store)
    else:
        raise ValueError(f"Unknown storage backend: {backend}")
    return make_async_container(storage, AppProvider())
