"""Hard Delete Message Command - physical removal, bypasses the lifecycle."""

import logging
from dataclasses import dataclass

from message_service.application.common.interfaces import Command, CommandHandler
from message_service.domain.exceptions import MessageNotFoundError
from message_service.domain.ports.repositories import MessageRepository
from message_service.domain.value_objects.message_id import MessageId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HardDeleteMessageCommand(Command[None]):
    message_id: str


class HardDeleteMessageHandler(CommandHandler[HardDeleteMessageCommand, None]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, command: HardDeleteMessageCommand) -> None:
        message_id = MessageId(command.message_id)
        if await self._message_repository.find_by_id(message_id) is None:
            raise MessageNotFoundError(message_id.value)

        await self._message_repository.delete_by_id(message_id)
        logger.info(f"[HardDeleteMessage] Removed {message_id} from the store")
