"""Message commands."""

from .create_message import CreateMessageCommand, CreateMessageHandler
from .update_message import UpdateMessageCommand, UpdateMessageHandler
from .publish_message import PublishMessageCommand, PublishMessageHandler
from .archive_message import ArchiveMessageCommand, ArchiveMessageHandler
from .delete_message import DeleteMessageCommand, DeleteMessageHandler
from .hard_delete_message import HardDeleteMessageCommand, HardDeleteMessageHandler

__all__ = [
    "CreateMessageCommand",
    "CreateMessageHandler",
    "UpdateMessageCommand",
    "UpdateMessageHandler",
    "PublishMessageCommand",
    "PublishMessageHandler",
    "ArchiveMessageCommand",
    "ArchiveMessageHandler",
    "DeleteMessageCommand",
    "DeleteMessageHandler",
    "HardDeleteMessageCommand",
    "HardDeleteMessageHandler",
]
