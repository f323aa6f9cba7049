"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value)
- Is immutable (frozen dataclass or enum member)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from message_service.domain.value_objects.message_id import MessageId
from message_service.domain.value_objects.message_status import MessageStatus

__all__ = [
    "MessageId",
    "MessageStatus",
]
