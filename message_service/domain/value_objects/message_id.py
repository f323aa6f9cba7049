"""
MessageId Value Object - Opaque identifier for a message.
"""

from __future__ import annotations
from dataclasses import dataclass
from uuid import uuid4

from message_service.domain.exceptions.invalid_argument import InvalidArgumentError


@dataclass(frozen=True)
class MessageId:
    value: str  # generated as a UUID4 string, but any non-blank token is accepted

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidArgumentError("message id", "cannot be empty")

    @classmethod
    def generate(cls) -> MessageId:
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
