"""
InvalidTransitionError - Raised when the lifecycle forbids a status change.
Maps to: HTTP 409 Conflict
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from message_service.domain.exceptions.domain_error import DomainError

if TYPE_CHECKING:
    from message_service.domain.value_objects.message_status import MessageStatus


class InvalidTransitionError(DomainError):
    def __init__(self, current: MessageStatus, target: MessageStatus):
        super().__init__(
            f"Cannot transition from {current.display_name} to {target.value}"
        )
        self.current = current
        self.target = target
