"""
Message Repository Port - Interface for message persistence.
Implementations:
- message_service/infrastructure/persistence/in_memory_message_repository.py
- message_service/infrastructure/persistence/prisma_message_repository.py

The contract does not define any ordering for list results.
"""

from abc import ABC, abstractmethod
from typing import Optional

from message_service.domain.entities.message import Message
from message_service.domain.value_objects.message_id import MessageId
from message_service.domain.value_objects.message_status import MessageStatus


class MessageRepository(ABC):
    @abstractmethod
    async def save(self, message: Message) -> Message:
        """Upsert by id and return the persisted representation."""
        ...

    @abstractmethod
    async def find_by_id(self, message_id: MessageId) -> Optional[Message]: ...

    @abstractmethod
    async def find_by_status(self, status: MessageStatus) -> list[Message]: ...

    @abstractmethod
    async def find_by_author(self, author: str) -> list[Message]:
        """Exact, case-sensitive match on the stored author."""
        ...

    @abstractmethod
    async def find_all_active(self) -> list[Message]:
        """Every message whose status is not DELETED."""
        ...

    @abstractmethod
    async def delete_by_id(self, message_id: MessageId) -> None:
        """Physically remove the row. Callers check existence first."""
        ...

    @abstractmethod
    async def count_by_status(self, status: MessageStatus) -> int: ...
