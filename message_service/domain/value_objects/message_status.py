"""
MessageStatus Value Object - The message lifecycle state machine.

Allowed transitions:
    DRAFT     -> PUBLISHED, DELETED
    PUBLISHED -> ARCHIVED, DELETED
    ARCHIVED  -> PUBLISHED, DELETED
    DELETED   -> (terminal)
"""

from __future__ import annotations
from enum import Enum

from message_service.domain.exceptions.invalid_argument import InvalidArgumentError


class MessageStatus(str, Enum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    ARCHIVED = "ARCHIVED"
    DELETED = "DELETED"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def is_terminal(self) -> bool:
        return not _TRANSITIONS[self]

    def can_transition_to(self, target: MessageStatus) -> bool:
        """Pure lookup in the transition table, no side effects."""
        return target in _TRANSITIONS[self]

    @classmethod
    def parse(cls, token: str) -> MessageStatus:
        """Convert a case-insensitive status token, e.g. from a URL path."""
        try:
            return cls(token.strip().upper())
        except (ValueError, AttributeError):
            raise InvalidArgumentError("status", f"unknown status '{token}'") from None


_TRANSITIONS: dict[MessageStatus, frozenset[MessageStatus]] = {
    MessageStatus.DRAFT: frozenset({MessageStatus.PUBLISHED, MessageStatus.DELETED}),
    MessageStatus.PUBLISHED: frozenset({MessageStatus.ARCHIVED, MessageStatus.DELETED}),
    MessageStatus.ARCHIVED: frozenset({MessageStatus.PUBLISHED, MessageStatus.DELETED}),
    MessageStatus.DELETED: frozenset(),
}
