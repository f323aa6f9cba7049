"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by the entity and the command/query handlers and
caught by the presentation layer, which maps them to HTTP status codes.
"""

from message_service.domain.exceptions.domain_error import DomainError
from message_service.domain.exceptions.invalid_argument import InvalidArgumentError
from message_service.domain.exceptions.invalid_state import InvalidStateError
from message_service.domain.exceptions.invalid_transition import InvalidTransitionError
from message_service.domain.exceptions.message_not_found import MessageNotFoundError
from message_service.domain.exceptions.message_already_deleted import (
    MessageAlreadyDeletedError,
)

__all__ = [
    "DomainError",
    "InvalidArgumentError",
    "InvalidStateError",
    "InvalidTransitionError",
    "MessageNotFoundError",
    "MessageAlreadyDeletedError",
]
