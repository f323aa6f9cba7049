"""Count Messages By Status Query - one count per lifecycle state."""

from dataclasses import dataclass

from message_service.application.common.interfaces import Query, QueryHandler
from message_service.domain.ports.repositories import MessageRepository
from message_service.domain.value_objects.message_status import MessageStatus


@dataclass(frozen=True)
class CountMessagesByStatusQuery(Query[dict[MessageStatus, int]]):
    pass


class CountMessagesByStatusHandler(
    QueryHandler[CountMessagesByStatusQuery, dict[MessageStatus, int]]
):

    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(
        self, query: CountMessagesByStatusQuery
    ) -> dict[MessageStatus, int]:
        return {
            status: await self._message_repository.count_by_status(status)
            for status in MessageStatus
        }
