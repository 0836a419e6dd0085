"""Tests for chats and messages."""

import pytest

from workova.core.exceptions import (
    ChatNotFoundException,
    ModerationRejectedException,
    NotChatMemberException,
    ValidationFailedException,
)
from workova.services import AuthService, ChatService, FeedService


@pytest.mark.asyncio
async def test_send_message_updates_chat_preview(database, chat, worker):
    chats = ChatService(database)

    message = await chats.send_message(chat.id, worker.id, "  Hi! I'll be there at 9.  ")

    assert message.text == "Hi! I'll be there at 9."
    assert message.sender_name == "Wren Worker"
    refreshed = await chats.get_chat(chat.id, worker.id)
    assert refreshed.last_message == message.text
    assert refreshed.updated_at == message.created_at
    assert await FeedService(database).messages_for_chat(chat.id) == [message]


@pytest.mark.asyncio
async def test_messages_are_listed_oldest_first(database, chat, customer, worker):
    chats = ChatService(database)
    first = await chats.send_message(chat.id, worker.id, "Hello")
    second = await chats.send_message(chat.id, customer.id, "Great, see you then")

    messages = await FeedService(database).messages_for_chat(chat.id)

    assert [m.id for m in messages] == [first.id, second.id]


@pytest.mark.asyncio
async def test_non_member_cannot_send(database, chat):
    outsider = await AuthService(database).sign_up(email="olly@mail.com", display_name="Olly")

    with pytest.raises(NotChatMemberException):
        await ChatService(database).send_message(chat.id, outsider.id, "Hello?")

    assert await FeedService(database).messages_for_chat(chat.id) == []


@pytest.mark.asyncio
async def test_non_member_cannot_read(database, chat):
    outsider = await AuthService(database).sign_up(email="olly@mail.com", display_name="Olly")

    with pytest.raises(NotChatMemberException):
        await ChatService(database).get_chat(chat.id, outsider.id)


@pytest.mark.asyncio
async def test_unknown_chat(database, worker):
    with pytest.raises(ChatNotFoundException):
        await ChatService(database).send_message("missing", worker.id, "Hello")


@pytest.mark.asyncio
async def test_message_length_limits(database, chat, worker):
    chats = ChatService(database, max_message_length=10)

    with pytest.raises(ValidationFailedException):
        await chats.send_message(chat.id, worker.id, "   ")
    with pytest.raises(ValidationFailedException):
        await chats.send_message(chat.id, worker.id, "x" * 11)

    message = await chats.send_message(chat.id, worker.id, "x" * 10)
    assert len(message.text) == 10


@pytest.mark.asyncio
async def test_chat_text_is_not_moderated_by_default(database, chat, worker):
    message = await ChatService(database).send_message(chat.id, worker.id, "buy crypto now!!!")

    assert message.text == "buy crypto now!!!"


@pytest.mark.asyncio
async def test_chat_moderation_can_be_enabled(database, chat, worker):
    chats = ChatService(database, moderate_messages=True)

    with pytest.raises(ModerationRejectedException) as exc_info:
        await chats.send_message(chat.id, worker.id, "buy crypto now!!!")

    assert exc_info.value.field == "text"
    assert (await chats.get_chat(chat.id)).last_message == ""
