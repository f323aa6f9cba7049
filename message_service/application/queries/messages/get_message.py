"""
GetMessage Query - Retrieve a single message by ID.

Soft-deleted messages are still returned; only a hard delete makes the
lookup fail.

Usage in presentation layer:
    handler: FromDishka[GetMessageHandler]
    message = await handler.execute(GetMessageQuery(message_id=message_id))
"""

from dataclasses import dataclass

from message_service.application.common.interfaces import Query, QueryHandler
from message_service.domain.entities.message import Message
from message_service.domain.exceptions import MessageNotFoundError
from message_service.domain.ports.repositories import MessageRepository
from message_service.domain.value_objects.message_id import MessageId


@dataclass(frozen=True)
class GetMessageQuery(Query[Message]):
    message_id: str


class GetMessageHandler(QueryHandler[GetMessageQuery, Message]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, query: GetMessageQuery) -> Message:
        message_id = MessageId(query.message_id)
        message = await self._message_repository.find_by_id(message_id)
        if message is None:
            raise MessageNotFoundError(message_id.value)
        return message
