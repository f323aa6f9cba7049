"""
Base interfaces for the message use cases (CQRS split).

Commands change stored messages, queries only read them. A handler is typed
against the concrete request it accepts and the result it returns:

    @dataclass(frozen=True)
    class PublishMessageCommand(Command[Message]):
        message_id: str

    class PublishMessageHandler(CommandHandler[PublishMessageCommand, Message]):
        async def execute(self, command: PublishMessageCommand) -> Message:
            ...

Handlers never catch domain errors; they propagate to the caller (the REST
adapter maps them to status codes).
"""
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

R = TypeVar("R")
C = TypeVar("C", bound="Command")
Q = TypeVar("Q", bound="Query")


class Command(Generic[R]):
    """Marker for a write request whose handler returns R."""


class Query(Generic[R]):
    """Marker for a read request whose handler returns R."""


class CommandHandler(ABC, Generic[C, R]):
    @abstractmethod
    async def execute(self, command: C) -> R:
        ...


class QueryHandler(ABC, Generic[Q, R]):
    @abstractmethod
    async def execute(self, query: Q) -> R:
        ...
