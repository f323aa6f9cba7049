"""
List Messages Queries.

Pure pass-throughs to the repository finders: no filtering, sorting or
argument validation happens here. Status tokens are parsed by the caller.
"""

from dataclasses import dataclass

from message_service.application.common.interfaces import Query, QueryHandler
from message_service.domain.entities.message import Message
from message_service.domain.ports.repositories import MessageRepository
from message_service.domain.value_objects.message_status import MessageStatus


@dataclass(frozen=True)
class ListActiveMessagesQuery(Query[list[Message]]):
    pass


class ListActiveMessagesHandler(
    QueryHandler[ListActiveMessagesQuery, list[Message]]
):

    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, query: ListActiveMessagesQuery) -> list[Message]:
        return await self._message_repository.find_all_active()


@dataclass(frozen=True)
class ListMessagesByStatusQuery(Query[list[Message]]):
    status: MessageStatus


class ListMessagesByStatusHandler(
    QueryHandler[ListMessagesByStatusQuery, list[Message]]
):

    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, query: ListMessagesByStatusQuery) -> list[Message]:
        return await self._message_repository.find_by_status(query.status)


@dataclass(frozen=True)
class ListMessagesByAuthorQuery(Query[list[Message]]):
    author: str


class ListMessagesByAuthorHandler(
    QueryHandler[ListMessagesByAuthorQuery, list[Message]]
):

    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, query: ListMessagesByAuthorQuery) -> list[Message]:
        return await self._message_repository.find_by_author(query.author)
