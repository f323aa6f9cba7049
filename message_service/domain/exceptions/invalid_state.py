"""
InvalidStateError - Raised when an operation is not allowed in the current state.
Maps to: HTTP 409 Conflict
"""

from message_service.domain.exceptions.domain_error import DomainError


class InvalidStateError(DomainError):
    """Raised when a deleted message is modified."""

    def __init__(self, message: str = "Cannot modify deleted message"):
        super().__init__(message)
