"""Publish Message Command."""

import logging
from dataclasses import dataclass

from message_service.application.common.interfaces import Command, CommandHandler
from message_service.domain.entities.message import Message
from message_service.domain.exceptions import MessageNotFoundError
from message_service.domain.ports.repositories import MessageRepository
from message_service.domain.value_objects.message_id import MessageId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PublishMessageCommand(Command[Message]):
    message_id: str


class PublishMessageHandler(CommandHandler[PublishMessageCommand, Message]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, command: PublishMessageCommand) -> Message:
        message_id = MessageId(command.message_id)
        message = await self._message_repository.find_by_id(message_id)
        if not message:
            raise MessageNotFoundError(message_id.value)

        message.publish()
        saved = await self._message_repository.save(message)

        logger.info(f"[PublishMessage] Published {message_id}")
        return saved
