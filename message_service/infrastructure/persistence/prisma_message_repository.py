"""
Prisma Message Repository Implementation.

- Implements MessageRepository port from domain layer
- Uses Prisma client for database operations (PostgreSQL)
- Maps between Prisma models and domain entities
- All methods are async

Prisma Message Model (from schema.prisma):
    model Message {
        id           String        @id
        content      String        @db.VarChar(1000)
        author       String
        status       MessageStatus
        created_at   DateTime
        updated_at   DateTime
        published_at DateTime?
        deleted_at   DateTime?
    }

Mapping:
- Prisma: id (str) ←→ Domain: id (MessageId)
- Prisma: status (enum str) ←→ Domain: status (MessageStatus)
- Other fields map directly. Rows are rebuilt through the full Message
  constructor, so a corrupted row (bad status, missing
  published_at or deleted_at, naive timestamps) fails loudly instead of
  leaking out. Status arguments may be enum members or plain tokens.

List results are ordered by created_at ascending. The port itself does not
promise any ordering.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from message_service.domain.entities.message import Message
from message_service.domain.ports.repositories import MessageRepository
from message_service.domain.value_objects.message_id import MessageId
from message_service.domain.value_objects.message_status import MessageStatus

if TYPE_CHECKING:
    from prisma import Prisma

logger = logging.getLogger(__name__)


class PrismaMessageRepository(MessageRepository):
    """
    Prisma implementation of MessageRepository.

    Handles persistence of Message entities to PostgreSQL via Prisma.
    """

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        """
        Initialize repository with Prisma client.

        Args:
            prisma: Connected Prisma client (injected by DI container)
        """
        self._prisma = prisma

    def _to_entity(self, record: Any) -> Message:
        """Map Prisma record to domain entity."""
        return Message(
            id=MessageId(record.id),
            content=record.content,
            author=record.author,
            status=MessageStatus(record.status),
            created_at=record.created_at,
            updated_at=record.updated_at,
            published_at=record.published_at,
            deleted_at=record.deleted_at,
        )

    async def save(self, message: Message) -> Message:
        """
        Save (create or update) a message.

        Uses upsert keyed on id, so saving the same entity twice is a no-op
        apart from the write itself. created_at is only written on create.
        """
        mutable_fields = {
            "content": message.content,
            "author": message.author,
            "status": message.status.value,
            "updated_at": message.updated_at,
            "published_at": message.published_at,
            "deleted_at": message.deleted_at,
        }
        record = await self._prisma.message.upsert(
            where={"id": message.id.value},
            data={
                "create": {
                    "id": message.id.value,
                    "created_at": message.created_at,
                    **mutable_fields,
                },
                "update": mutable_fields,
            },
        )
        logger.debug(f"[PrismaMessageRepository] Upserted {message.id}")
        return self._to_entity(record)

    async def find_by_id(self, message_id: MessageId) -> Optional[Message]:
        record = await self._prisma.message.find_unique(where={"id": message_id.value})
        return self._to_entity(record) if record else None

    async def find_by_status(self, status: MessageStatus) -> list[Message]:
        records = await self._prisma.message.find_many(
            where={"status": MessageStatus(status).value},
            order={"created_at": "asc"},
        )
        return [self._to_entity(record) for record in records]

    async def find_by_author(self, author: str) -> list[Message]:
        """Exact match: no trimming, no case folding."""
        records = await self._prisma.message.find_many(
            where={"author": author},
            order={"created_at": "asc"},
        )
        return [self._to_entity(record) for record in records]

    async def find_all_active(self) -> list[Message]:
        records = await self._prisma.message.find_many(
            where={"status": {"not": MessageStatus.DELETED.value}},
            order={"created_at": "asc"},
        )
        return [self._to_entity(record) for record in records]

    async def delete_by_id(self, message_id: MessageId) -> None:
        await self._prisma.message.delete(where={"id": message_id.value})
        logger.debug(f"[PrismaMessageRepository] Deleted {message_id}")

    async def count_by_status(self, status: MessageStatus) -> int:
        return await self._prisma.message.count(
            where={"status": MessageStatus(status).value}
        )
