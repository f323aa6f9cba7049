"""
In-Memory Message Repository Implementation.

- Implements MessageRepository port with a dict keyed by MessageId
- Stores and returns copies, so an entity loaded by one handler call is
  never the same object held by the store or by another call
- List results are ordered by created_at (oldest first); this ordering is
  specific to this adapter and not part of the port contract
- Used as the default store for local runs and by the test-suite
"""

import logging
from dataclasses import replace
from typing import Callable, Optional

from message_service.domain.entities.message import Message
from message_service.domain.ports.repositories import MessageRepository
from message_service.domain.value_objects.message_id import MessageId
from message_service.domain.value_objects.message_status import MessageStatus

logger = logging.getLogger(__name__)


class InMemoryMessageRepository(MessageRepository):
    _messages: dict[MessageId, Message]

    def __init__(self):
        self._messages = {}

    def _select(self, predicate: Callable[[Message], bool]) -> list[Message]:
        matches = [m for m in self._messages.values() if predicate(m)]
        matches.sort(key=lambda m: m.created_at)
        return [replace(m) for m in matches]

    async def save(self, message: Message) -> Message:
        """Save (create or update) a message."""
        self._messages[message.id] = replace(message)
        logger.debug(f"[InMemoryMessageRepository] Saved {message.id}")
        return replace(message)

    async def find_by_id(self, message_id: MessageId) -> Optional[Message]:
        stored = self._messages.get(message_id)
        return replace(stored) if stored is not None else None

    async def find_by_status(self, status: MessageStatus) -> list[Message]:
        status = MessageStatus(status)
        return self._select(lambda m: m.status is status)

    async def find_by_author(self, author: str) -> list[Message]:
        return self._select(lambda m: m.author == author)

    async def find_all_active(self) -> list[Message]:
        return self._select(lambda m: m.status is not MessageStatus.DELETED)

    async def delete_by_id(self, message_id: MessageId) -> None:
        # Raises KeyError for unknown ids: existence is the caller's check
        del self._messages[message_id]
        logger.debug(f"[InMemoryMessageRepository] Removed {message_id}")

    async def count_by_status(self, status: MessageStatus) -> int:
        status = MessageStatus(status)
        return sum(1 for m in self._messages.values() if m.status is status)

    def __len__(self) -> int:
        return len(self._messages)
