"""Message DTOs for API request/response."""

from __future__ import annotations
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from message_service.domain.entities.message import Message
from message_service.domain.value_objects.message_status import MessageStatus


class MessageDTO(BaseModel):
    """DTO for message data returned to clients."""

    id: str
    content: str
    status: MessageStatus
    author: str
    created_at: datetime
    updated_at: datetime
    published_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, message: Message) -> MessageDTO:
        return cls(
            id=message.id.value,
            content=message.content,
            status=message.status,
            author=message.author,
            created_at=message.created_at,
            updated_at=message.updated_at,
            published_at=message.published_at,
            deleted_at=message.deleted_at,
        )


class MessageStatsDTO(BaseModel):
    """Number of stored messages per status, serialized under the status tokens."""

    model_config = ConfigDict(populate_by_name=True)

    draft: int = Field(0, alias="DRAFT")
    published: int = Field(0, alias="PUBLISHED")
    archived: int = Field(0, alias="ARCHIVED")
    deleted: int = Field(0, alias="DELETED")

    @classmethod
    def from_counts(cls, counts: dict[MessageStatus, int]) -> MessageStatsDTO:
        return cls(**{status.value: count for status, count in counts.items()})
