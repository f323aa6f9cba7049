"""
Dishka DI Container Setup.

- Registers the MessageRepository implementation and every handler
- Maps the abstract port to a concrete adapter chosen by Config.MESSAGE_STORE
- Manages lifecycle: the repository lives for the whole app (Scope.APP) so the
  in-memory store survives across requests and Prisma connects once;
  handlers are stateless and built per request (Scope.REQUEST)

Flow:
  Container → provides → InMemoryMessageRepository / PrismaMessageRepository
                                    ↓
                 injected as MessageRepository into → PublishMessageHandler
"""

import logging
from typing import AsyncIterator, Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from message_service.application.commands.messages import (
    ArchiveMessageHandler,
    CreateMessageHandler,
    DeleteMessageHandler,
    HardDeleteMessageHandler,
    PublishMessageHandler,
    UpdateMessageHandler,
)
from message_service.application.queries.messages import (
    CountMessagesByStatusHandler,
    GetMessageHandler,
    ListActiveMessagesHandler,
    ListMessagesByAuthorHandler,
    ListMessagesByStatusHandler,
)
from message_service.config.settings import Config
from message_service.domain.ports.repositories import MessageRepository
from message_service.infrastructure.persistence import (
    InMemoryMessageRepository,
    PrismaMessageRepository,
)

logger = logging.getLogger(__name__)


class AppProvider(Provider):
    """
    Application dependency provider.

    Args:
        store: "memory" or "prisma"; defaults to Config.MESSAGE_STORE
        repository: ready-made repository to use instead (tests)
    """

    def __init__(
        self,
        store: Optional[str] = None,
        repository: Optional[MessageRepository] = None,
    ):
        super().__init__()
        self._store = (store or Config.MESSAGE_STORE).lower()
        self._repository = repository

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.APP)
    async def get_message_repository(self) -> AsyncIterator[MessageRepository]:
        """
        Provide MessageRepository implementation.

        - Return type is ABSTRACT (MessageRepository)
        - The generator form lets the container disconnect Prisma on close()
        """
        if self._repository is not None:
            yield self._repository
            return

        if self._store == "prisma":
            # Imported here: the generated client only exists after `prisma generate`
            from prisma import Prisma

            prisma = Prisma()
            await prisma.connect()
            logger.info("[Container] Connected Prisma message store")
            try:
                yield PrismaMessageRepository(prisma)
            finally:
                await prisma.disconnect()
                logger.info("[Container] Disconnected Prisma message store")
        elif self._store == "memory":
            logger.info("[Container] Using in-memory message store")
            yield InMemoryMessageRepository()
        else:
            raise ValueError(f"Unknown MESSAGE_STORE: {self._store}")

    # ==================== COMMAND HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_message_handler(
        self, message_repository: MessageRepository
    ) -> CreateMessageHandler:
        return CreateMessageHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_update_message_handler(
        self, message_repository: MessageRepository
    ) -> UpdateMessageHandler:
        return UpdateMessageHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_publish_message_handler(
        self, message_repository: MessageRepository
    ) -> PublishMessageHandler:
        return PublishMessageHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_archive_message_handler(
        self, message_repository: MessageRepository
    ) -> ArchiveMessageHandler:
        return ArchiveMessageHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_delete_message_handler(
        self, message_repository: MessageRepository
    ) -> DeleteMessageHandler:
        return DeleteMessageHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_hard_delete_message_handler(
        self, message_repository: MessageRepository
    ) -> HardDeleteMessageHandler:
        return HardDeleteMessageHandler(message_repository)

    # ==================== QUERY HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_get_message_handler(
        self, message_repository: MessageRepository
    ) -> GetMessageHandler:
        return GetMessageHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_active_messages_handler(
        self, message_repository: MessageRepository
    ) -> ListActiveMessagesHandler:
        return ListActiveMessagesHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_messages_by_status_handler(
        self, message_repository: MessageRepository
    ) -> ListMessagesByStatusHandler:
        return ListMessagesByStatusHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_messages_by_author_handler(
        self, message_repository: MessageRepository
    ) -> ListMessagesByAuthorHandler:
        return ListMessagesByAuthorHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_count_messages_by_status_handler(
        self, message_repository: MessageRepository
    ) -> CountMessagesByStatusHandler:
        return CountMessagesByStatusHandler(message_repository)


def create_container(
    store: Optional[str] = None,
    repository: Optional[MessageRepository] = None,
) -> AsyncContainer:
    """
    Create and configure the DI container.

    Call this ONCE per application instance.
    """
    return make_async_container(AppProvider(store=store, repository=repository))
