"""
Prisma-backed repository ports.

Importing this module requires a generated Prisma client
(`prisma generate`), which is why the container loads it lazily.
"""

from typing import AsyncIterable

from dishka import Provider, Scope, provide
from prisma import Prisma

from chatcore.domain.ports.repositories import (
    BookmarkRepository,
    ConversationRepository,
    MessageRepository,
    ParticipantRepository,
    ReactionRepository,
    UserRepository,
)
from chatcore.infrastructure.persistence.prisma_conversation_repository import (
    PrismaConversationRepository,
)
from chatcore.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)
from chatcore.infrastructure.persistence.prisma_participant_repository import (
    PrismaParticipantRepository,
)
from chatcore.infrastructure.persistence.prisma_social_repositories import (
    PrismaBookmarkRepository,
    PrismaReactionRepository,
)
from chatcore.infrastructure.persistence.prisma_user_repository import (
    PrismaUserRepository,
)


class PrismaStorageProvider(Provider):
    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - Scope.APP = created ONCE when app starts, shared across all requests
        - Disconnected when the container is closed
        """
        prisma = Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_conversation_repository(self, prisma: Prisma) -> ConversationRepository:
        return PrismaConversationRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_participant_repository(self, prisma: Prisma) -> ParticipantRepository:
        return PrismaParticipantRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, prisma: Prisma) -> MessageRepository:
        return PrismaMessageRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_reaction_repository(self, prisma: Prisma) -> ReactionRepository:
        return PrismaReactionRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_bookmark_repository(self, prisma: Prisma) -> BookmarkRepository:
        return PrismaBookmarkRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, prisma: Prisma) -> UserRepository:
        return PrismaUserRepository(prisma)
