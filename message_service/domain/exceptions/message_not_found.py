"""
MessageNotFoundError - Raised when no message exists for the given ID.
Maps to: HTTP 404 Not Found
"""

from message_service.domain.exceptions.domain_error import DomainError


class MessageNotFoundError(DomainError):
    """Exception raised when a requested message is not found."""

    def __init__(self, message_id: str):
        super().__init__(f"Message {message_id} not found")
        self.message_id = message_id
