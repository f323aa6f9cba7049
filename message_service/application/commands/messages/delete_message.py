"""
Delete Message Command (logical delete).

The record stays in the store with status DELETED. Deleting twice raises
MessageAlreadyDeletedError rather than the generic InvalidTransitionError,
so callers can tell "already gone" apart from other refused transitions.
"""

import logging
from dataclasses import dataclass

from message_service.application.common.interfaces import Command, CommandHandler
from message_service.domain.exceptions import (
    MessageAlreadyDeletedError,
    MessageNotFoundError,
)
from message_service.domain.ports.repositories import MessageRepository
from message_service.domain.value_objects.message_id import MessageId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteMessageCommand(Command[None]):
    message_id: str


class DeleteMessageHandler(CommandHandler[DeleteMessageCommand, None]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, command: DeleteMessageCommand) -> None:
        message_id = MessageId(command.message_id)
        message = await self._message_repository.find_by_id(message_id)
        if not message:
            raise MessageNotFoundError(message_id.value)

        if message.is_deleted:
            raise MessageAlreadyDeletedError(message_id.value)

        message.delete()
        await self._message_repository.save(message)

        logger.info(f"[DeleteMessage] Soft-deleted {message_id}")
