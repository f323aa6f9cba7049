"""
MessageAlreadyDeletedError - Raised when deleting a message twice.
Maps to: HTTP 409 Conflict
"""

from message_service.domain.exceptions.domain_error import DomainError


class MessageAlreadyDeletedError(DomainError):
    def __init__(self, message_id: str):
        super().__init__(f"Message with ID {message_id} is already deleted")
        self.message_id = message_id
