"""
Unit tests for the message command handlers, run against the in-memory store.

Run with: pytest tests/test_message_commands.py -v
"""

from unittest.mock import AsyncMock

import pytest

from message_service.application.common.interfaces import CommandHandler
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
from message_service.domain.entities.message import MAX_CONTENT_LENGTH
from message_service.domain.exceptions import (
    InvalidArgumentError,
    InvalidStateError,
    InvalidTransitionError,
    MessageAlreadyDeletedError,
    MessageNotFoundError,
)
from message_service.domain.value_objects import MessageId, MessageStatus

UNKNOWN_ID = "00000000-0000-0000-0000-000000000000"


async def create(repository, content="Hello", author="Alice"):
    handler = CreateMessageHandler(repository)
    return await handler.execute(CreateMessageCommand(content=content, author=author))


class TestCreateMessage:
    @pytest.mark.asyncio
    async def test_create_persists_a_trimmed_draft(self, repository):
        message = await create(repository, "  Hello ", " Alice  ")

        assert message.status is MessageStatus.DRAFT
        assert message.content == "Hello"
        assert message.author == "Alice"
        assert message.published_at is None
        assert message.deleted_at is None

        stored = await repository.find_by_id(message.id)
        assert stored == message
        assert stored.content == "Hello"

    @pytest.mark.asyncio
    async def test_invalid_content_never_reaches_the_repository(self, repository):
        repository.save = AsyncMock()

        with pytest.raises(InvalidArgumentError):
            await create(repository, content="")

        repository.save.assert_not_awaited()
        assert len(repository) == 0

    @pytest.mark.asyncio
    async def test_invalid_author_never_reaches_the_repository(self, repository):
        repository.save = AsyncMock()

        with pytest.raises(InvalidArgumentError):
            await create(repository, author="   ")

        repository.save.assert_not_awaited()


class TestUpdateMessage:
    @pytest.mark.asyncio
    async def test_update_saves_new_content(self, repository):
        message = await create(repository)

        updated = await UpdateMessageHandler(repository).execute(
            UpdateMessageCommand(message_id=message.id.value, new_content=" Hi there ")
        )

        assert updated.content == "Hi there"
        assert (await repository.find_by_id(message.id)).content == "Hi there"

    @pytest.mark.asyncio
    async def test_update_unknown_id_is_not_found(self, repository):
        with pytest.raises(MessageNotFoundError) as exc_info:
            await UpdateMessageHandler(repository).execute(
                UpdateMessageCommand(message_id=UNKNOWN_ID, new_content="x")
            )
        assert exc_info.value.message_id == UNKNOWN_ID

    @pytest.mark.asyncio
    async def test_update_too_long_keeps_stored_content(self, repository):
        message = await create(repository)

        with pytest.raises(InvalidArgumentError):
            await UpdateMessageHandler(repository).execute(
                UpdateMessageCommand(
                    message_id=message.id.value,
                    new_content="x" * (MAX_CONTENT_LENGTH + 1),
                )
            )

        assert (await repository.find_by_id(message.id)).content == "Hello"

    @pytest.mark.asyncio
    async def test_update_deleted_message_is_invalid_state(self, repository):
        message = await create(repository)
        await DeleteMessageHandler(repository).execute(
            DeleteMessageCommand(message_id=message.id.value)
        )
        repository.save = AsyncMock()

        with pytest.raises(InvalidStateError):
            await UpdateMessageHandler(repository).execute(
                UpdateMessageCommand(message_id=message.id.value, new_content="late")
            )

        repository.save.assert_not_awaited()


class TestPublishAndArchive:
    @pytest.mark.asyncio
    async def test_publish_draft(self, repository):
        message = await create(repository)

        published = await PublishMessageHandler(repository).execute(
            PublishMessageCommand(message_id=message.id.value)
        )

        assert published.status is MessageStatus.PUBLISHED
        assert published.published_at is not None
        stored = await repository.find_by_id(message.id)
        assert stored.status is MessageStatus.PUBLISHED

    @pytest.mark.asyncio
    async def test_publish_twice_is_invalid_transition(self, repository):
        message = await create(repository)
        handler = PublishMessageHandler(repository)
        await handler.execute(PublishMessageCommand(message_id=message.id.value))

        with pytest.raises(InvalidTransitionError):
            await handler.execute(PublishMessageCommand(message_id=message.id.value))

    @pytest.mark.asyncio
    async def test_publish_unknown_id_is_not_found(self, repository):
        with pytest.raises(MessageNotFoundError):
            await PublishMessageHandler(repository).execute(
                PublishMessageCommand(message_id=UNKNOWN_ID)
            )

    @pytest.mark.asyncio
    async def test_archive_then_republish(self, repository, clock):
        message = await create(repository)
        publish = PublishMessageHandler(repository)
        first = await publish.execute(PublishMessageCommand(message_id=message.id.value))

        archived = await ArchiveMessageHandler(repository).execute(
            ArchiveMessageCommand(message_id=message.id.value)
        )
        assert archived.status is MessageStatus.ARCHIVED
        assert archived.published_at == first.published_at

        again = await publish.execute(PublishMessageCommand(message_id=message.id.value))
        assert again.published_at > first.published_at
        assert again.created_at == message.created_at

    @pytest.mark.asyncio
    async def test_archive_draft_is_invalid_transition(self, repository):
        message = await create(repository)

        with pytest.raises(InvalidTransitionError):
            await ArchiveMessageHandler(repository).execute(
                ArchiveMessageCommand(message_id=message.id.value)
            )

        assert (await repository.find_by_id(message.id)).status is MessageStatus.DRAFT


class TestDeleteMessage:
    @pytest.mark.asyncio
    async def test_soft_delete_keeps_the_record(self, repository):
        message = await create(repository)

        result = await DeleteMessageHandler(repository).execute(
            DeleteMessageCommand(message_id=message.id.value)
        )

        assert result is None
        stored = await repository.find_by_id(message.id)
        assert stored.status is MessageStatus.DELETED
        assert stored.deleted_at is not None

    @pytest.mark.asyncio
    async def test_second_delete_is_already_deleted(self, repository):
        message = await create(repository)
        handler = DeleteMessageHandler(repository)
        await handler.execute(DeleteMessageCommand(message_id=message.id.value))

        with pytest.raises(MessageAlreadyDeletedError) as exc_info:
            await handler.execute(DeleteMessageCommand(message_id=message.id.value))

        assert not isinstance(exc_info.value, InvalidTransitionError)
        assert exc_info.value.message_id == message.id.value

    @pytest.mark.asyncio
    async def test_delete_unknown_id_is_not_found(self, repository):
        with pytest.raises(MessageNotFoundError):
            await DeleteMessageHandler(repository).execute(
                DeleteMessageCommand(message_id=UNKNOWN_ID)
            )

    @pytest.mark.asyncio
    async def test_hard_delete_removes_any_status(self, repository):
        message = await create(repository)
        await DeleteMessageHandler(repository).execute(
            DeleteMessageCommand(message_id=message.id.value)
        )

        await HardDeleteMessageHandler(repository).execute(
            HardDeleteMessageCommand(message_id=message.id.value)
        )

        assert await repository.find_by_id(message.id) is None

    @pytest.mark.asyncio
    async def test_hard_delete_unknown_id_is_not_found(self, repository):
        repository.delete_by_id = AsyncMock()

        with pytest.raises(MessageNotFoundError):
            await HardDeleteMessageHandler(repository).execute(
                HardDeleteMessageCommand(message_id=UNKNOWN_ID)
            )

        repository.delete_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_blank_id_is_invalid_argument(self, repository):
        with pytest.raises(InvalidArgumentError):
            await DeleteMessageHandler(repository).execute(
                DeleteMessageCommand(message_id="  ")
            )


class TestFullLifecycleScenario:
    @pytest.mark.asyncio
    async def test_create_publish_update_delete_then_hard_delete(self, repository):
        message = await create(repository, "Hello", "Alice")
        message_id = message.id.value

        await PublishMessageHandler(repository).execute(
            PublishMessageCommand(message_id=message_id)
        )
        updated = await UpdateMessageHandler(repository).execute(
            UpdateMessageCommand(message_id=message_id, new_content="Hello again")
        )
        assert updated.content == "Hello again"
        assert updated.status is MessageStatus.PUBLISHED

        delete = DeleteMessageHandler(repository)
        await delete.execute(DeleteMessageCommand(message_id=message_id))
        with pytest.raises(MessageAlreadyDeletedError):
            await delete.execute(DeleteMessageCommand(message_id=message_id))

        # Logical delete only: the record is still there
        stored = await repository.find_by_id(MessageId(message_id))
        assert stored is not None
        assert stored.status is MessageStatus.DELETED
        assert stored.published_at is not None

        await HardDeleteMessageHandler(repository).execute(
            HardDeleteMessageCommand(message_id=message_id)
        )
        assert await repository.find_by_id(MessageId(message_id)) is None


class TestHandlerInterfaces:
    def test_every_command_handler_implements_the_interface(self):
        for handler in (
            CreateMessageHandler,
            UpdateMessageHandler,
            PublishMessageHandler,
            ArchiveMessageHandler,
            DeleteMessageHandler,
            HardDeleteMessageHandler,
        ):
            assert issubclass(handler, CommandHandler)

    def test_handler_without_execute_cannot_be_built(self):
        class Incomplete(CommandHandler[PublishMessageCommand, None]):
            pass

        with pytest.raises(TypeError):
            Incomplete()
