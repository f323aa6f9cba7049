"""
Messages API Router - FastAPI endpoints for the message lifecycle.

- Receives handlers via Dependency Injection (Dishka)
- Thin layer: only handles HTTP concerns (request/response)
- Domain errors are NOT caught here; the exception handlers registered in
  fastapi_app.py map them to status codes

Flow:
  HTTP Request → Router → Command/Query → Handler → Repository
                                 ↓
  HTTP Response ← Router ← MessageDTO ←
"""

from logging import getLogger

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Response, status
from pydantic import BaseModel

from message_service.application.commands.messages import (
    ArchiveMessageCommand,
    ArchiveMessageHandler,
    CreateMessageCommand,
    CreateMessageHandler,
    DeleteMessageCommand,
    DeleteMessageHandler,
    HardDeleteMessageCommand,
    HardDeleteMessageHandler,
    PublishMessageCommand,
    PublishMessageHandler,
    UpdateMessageCommand,
    UpdateMessageHandler,
)
from message_service.application.dto import MessageDTO, MessageStatsDTO
from message_service.application.queries.messages import (
    CountMessagesByStatusHandler,
    CountMessagesByStatusQuery,
    GetMessageHandler,
    GetMessageQuery,
    ListActiveMessagesHandler,
    ListActiveMessagesQuery,
    ListMessagesByAuthorHandler,
    ListMessagesByAuthorQuery,
    ListMessagesByStatusHandler,
    ListMessagesByStatusQuery,
)
from message_service.domain.value_objects.message_status import MessageStatus

logger = getLogger(__name__)


# ==================== REQUEST MODELS ====================


class CreateMessageRequest(BaseModel):
    """Request body for creating a message."""

    content: str
    author: str


class UpdateMessageRequest(BaseModel):
    content: str


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/messages", tags=["messages"])


# ==================== QUERIES ====================


@router.get(
    "",
    response_model=list[MessageDTO],
    response_model_exclude_none=True,
)
@inject
async def list_active_messages(handler: FromDishka[ListActiveMessagesHandler]):
    """Retrieve all messages that are not soft-deleted."""
    messages = await handler.execute(ListActiveMessagesQuery())
    logger.info(f"GET /api/messages - Returning {len(messages)} message(s)")
    return [MessageDTO.from_entity(m) for m in messages]


@router.get("/stats", response_model=MessageStatsDTO)
@inject
async def count_messages_by_status(
    handler: FromDishka[CountMessagesByStatusHandler],
):
    counts = await handler.execute(CountMessagesByStatusQuery())
    return MessageStatsDTO.from_counts(counts)


@router.get(
    "/status/{status_token}",
    response_model=list[MessageDTO],
    response_model_exclude_none=True,
)
@inject
async def list_messages_by_status(
    status_token: str,
    handler: FromDishka[ListMessagesByStatusHandler],
):
    """Retrieve messages by status (token is case-insensitive)."""
    logger.info(f"GET /api/messages/status/{status_token}")
    message_status = MessageStatus.parse(status_token)
    messages = await handler.execute(ListMessagesByStatusQuery(status=message_status))
    return [MessageDTO.from_entity(m) for m in messages]


@router.get(
    "/author/{author}",
    response_model=list[MessageDTO],
    response_model_exclude_none=True,
)
@inject
async def list_messages_by_author(
    author: str,
    handler: FromDishka[ListMessagesByAuthorHandler],
):
    logger.info(f"GET /api/messages/author/{author}")
    messages = await handler.execute(ListMessagesByAuthorQuery(author=author))
    return [MessageDTO.from_entity(m) for m in messages]


@router.get(
    "/{message_id}",
    response_model=MessageDTO,
    response_model_exclude_none=True,
)
@inject
async def get_message(message_id: str, handler: FromDishka[GetMessageHandler]):
    message = await handler.execute(GetMessageQuery(message_id=message_id))
    return MessageDTO.from_entity(message)


# ==================== COMMANDS ====================


@router.post(
    "",
    response_model=MessageDTO,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_message(
    request: CreateMessageRequest,
    handler: FromDishka[CreateMessageHandler],
):
    """Create a new draft message."""
    logger.info("POST /api/messages - Creating new message")
    message = await handler.execute(
        CreateMessageCommand(content=request.content, author=request.author)
    )
    logger.info(f"POST /api/messages - Message created, ID: {message.id}")
    return MessageDTO.from_entity(message)


@router.put(
    "/{message_id}",
    response_model=MessageDTO,
    response_model_exclude_none=True,
)
@inject
async def update_message(
    message_id: str,
    request: UpdateMessageRequest,
    handler: FromDishka[UpdateMessageHandler],
):
    """Replace the content of a message that is not deleted."""
    logger.info(f"PUT /api/messages/{message_id} - Updating message content")
    message = await handler.execute(
        UpdateMessageCommand(message_id=message_id, new_content=request.content)
    )
    return MessageDTO.from_entity(message)


@router.post(
    "/{message_id}/publish",
    response_model=MessageDTO,
    response_model_exclude_none=True,
)
@inject
async def publish_message(
    message_id: str,
    handler: FromDishka[PublishMessageHandler],
):
    logger.info(f"POST /api/messages/{message_id}/publish - Publishing message")
    message = await handler.execute(PublishMessageCommand(message_id=message_id))
    return MessageDTO.from_entity(message)


@router.post(
    "/{message_id}/archive",
    response_model=MessageDTO,
    response_model_exclude_none=True,
)
@inject
async def archive_message(
    message_id: str,
    handler: FromDishka[ArchiveMessageHandler],
):
    logger.info(f"POST /api/messages/{message_id}/archive - Archiving message")
    message = await handler.execute(ArchiveMessageCommand(message_id=message_id))
    return MessageDTO.from_entity(message)


@router.delete("/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def delete_message(
    message_id: str,
    handler: FromDishka[DeleteMessageHandler],
):
    """Soft delete: the message stays readable by ID with status DELETED."""
    logger.info(f"DELETE /api/messages/{message_id} - Deleting message")
    await handler.execute(DeleteMessageCommand(message_id=message_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{message_id}/hard", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def hard_delete_message(
    message_id: str,
    handler: FromDishka[HardDeleteMessageHandler],
):
    """Physically remove the message, whatever its status."""
    logger.info(f"DELETE /api/messages/{message_id}/hard - Removing message")
    await handler.execute(HardDeleteMessageCommand(message_id=message_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
