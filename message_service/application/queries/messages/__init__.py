"""Message-related queries."""

from message_service.application.queries.messages.get_message import (
    GetMessageQuery,
    GetMessageHandler,
)
from message_service.application.queries.messages.list_messages import (
    ListActiveMessagesQuery,
    ListActiveMessagesHandler,
    ListMessagesByStatusQuery,
    ListMessagesByStatusHandler,
    ListMessagesByAuthorQuery,
    ListMessagesByAuthorHandler,
)
from message_service.application.queries.messages.count_messages import (
    CountMessagesByStatusQuery,
    CountMessagesByStatusHandler,
)

__all__ = [
    "GetMessageQuery",
    "GetMessageHandler",
    "ListActiveMessagesQuery",
    "ListActiveMessagesHandler",
    "ListMessagesByStatusQuery",
    "ListMessagesByStatusHandler",
    "ListMessagesByAuthorQuery",
    "ListMessagesByAuthorHandler",
    "CountMessagesByStatusQuery",
    "CountMessagesByStatusHandler",
]
