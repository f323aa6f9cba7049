"""
Message Entity - A short authored text moving through the publishing lifecycle.

Every status change is checked against MessageStatus before anything is
mutated, so a failed operation leaves the entity untouched.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from message_service.domain.exceptions import (
    InvalidArgumentError,
    InvalidStateError,
    InvalidTransitionError,
)
from message_service.domain.value_objects.message_id import MessageId
from message_service.domain.value_objects.message_status import MessageStatus

MAX_CONTENT_LENGTH = 1000


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def validate_content(content: Optional[str]) -> str:
    """Return the trimmed content or raise InvalidArgumentError."""
    if content is None or not isinstance(content, str) or not content.strip():
        raise InvalidArgumentError("content", "Message content cannot be empty")
    trimmed = content.strip()
    if len(trimmed) > MAX_CONTENT_LENGTH:
        raise InvalidArgumentError(
            "content",
            f"Message content is too long (max {MAX_CONTENT_LENGTH} characters)",
        )
    return trimmed


def validate_author(author: Optional[str]) -> str:
    """Return the trimmed author or raise InvalidArgumentError."""
    if author is None or not isinstance(author, str) or not author.strip():
        raise InvalidArgumentError("author", "Author cannot be empty")
    return author.strip()


@dataclass(eq=False)
class Message:
    id: MessageId
    content: str
    author: str
    status: MessageStatus
    created_at: datetime
    updated_at: datetime
    published_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    def __post_init__(self):
        # Full constructor, also used when rebuilding rows from storage.
        self.content = validate_content(self.content)
        self.author = validate_author(self.author)
        self.status = MessageStatus(self.status)
        for field in ("created_at", "updated_at", "published_at", "deleted_at"):
            value = getattr(self, field)
            if value is not None and value.utcoffset() is None:
                raise InvalidArgumentError(field, "must be timezone-aware")
        if self.updated_at < self.created_at:
            raise InvalidArgumentError("updated_at", "cannot precede created_at")
        if (self.status is MessageStatus.DELETED) != (self.deleted_at is not None):
            raise InvalidArgumentError(
                "deleted_at", "must be set exactly when status is DELETED"
            )
        # A deleted message may or may not have been published before.
        if self.status in (MessageStatus.PUBLISHED, MessageStatus.ARCHIVED):
            if self.published_at is None:
                raise InvalidArgumentError(
                    "published_at", f"is required for status {self.status.value}"
                )
        elif self.status is MessageStatus.DRAFT and self.published_at is not None:
            raise InvalidArgumentError("published_at", "must be empty for a Draft")

    @classmethod
    def create(cls, content: str, author: str) -> Message:
        """Factory method for a new Draft with a generated ID."""
        now = _utcnow()
        return cls(
            id=MessageId.generate(),
            content=content,
            author=author,
            status=MessageStatus.DRAFT,
            created_at=now,
            updated_at=now,
        )

    # ==================== LIFECYCLE ====================

    def publish(self) -> None:
        self._transition_to(MessageStatus.PUBLISHED)
        self.published_at = self.updated_at

    def archive(self) -> None:
        self._transition_to(MessageStatus.ARCHIVED)

    def delete(self) -> None:
        self._transition_to(MessageStatus.DELETED)
        self.deleted_at = self.updated_at

    def update_content(self, new_content: str) -> None:
        # Not a status change, so the transition table does not apply here.
        if self.status is MessageStatus.DELETED:
            raise InvalidStateError("Cannot modify deleted message")
        self.content = validate_content(new_content)
        self._touch()

    @property
    def is_published(self) -> bool:
        return self.status is MessageStatus.PUBLISHED

    @property
    def is_deleted(self) -> bool:
        return self.status is MessageStatus.DELETED

    def _transition_to(self, target: MessageStatus) -> None:
        if not self.status.can_transition_to(target):
            raise InvalidTransitionError(self.status, target)
        self.status = target
        self._touch()

    def _touch(self) -> None:
        # Clock skew must never break updated_at >= created_at.
        self.updated_at = max(_utcnow(), self.created_at)

    # ==================== IDENTITY ====================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Message):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
