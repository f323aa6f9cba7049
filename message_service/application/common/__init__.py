"""Shared application-layer interfaces."""

from message_service.application.common.interfaces import (
    Command,
    CommandHandler,
    Query,
    QueryHandler,
)

__all__ = ["Command", "CommandHandler", "Query", "QueryHandler"]
