"""
InvalidArgumentError - Raised when a field fails validation.
Maps to: HTTP 400 Bad Request
"""

from message_service.domain.exceptions.domain_error import DomainError


class InvalidArgumentError(DomainError):
    """Raised when content, author or an identifier is rejected."""

    def __init__(self, field: str, reason: str):
        super().__init__(f"Invalid {field}: {reason}")
        self.field = field
        self.reason = reason
