"""
Create Message Command.

- Command: @dataclass(frozen=True) holding the raw content and author
- Handler: builds a Draft through Message.create (which validates and trims)
  and saves it. A validation failure raises before the repository is touched.
"""

import logging
from dataclasses import dataclass

from message_service.application.common.interfaces import Command, CommandHandler
from message_service.domain.entities.message import Message
from message_service.domain.ports.repositories import MessageRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateMessageCommand(Command[Message]):
    content: str
    author: str


class CreateMessageHandler(CommandHandler[CreateMessageCommand, Message]):
    _message_repository: MessageRepository

    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, command: CreateMessageCommand) -> Message:
        message = Message.create(content=command.content, author=command.author)
        saved = await self._message_repository.save(message)
        logger.info(f"[CreateMessage] Created draft {saved.id} by '{saved.author}'")
        return saved
