"""
Chat service - reading chats and sending messages.
"""
from typing import Optional

from workova.core.config import settings
from workova.core.database import Database
from workova.core.exceptions import (
    AccountNotFoundException,
    ChatNotFoundException,
    NotChatMemberException,
    ValidationFailedException,
)
from workova.core.logging import get_logger
from workova.core.validation import ensure_clean, require_text
from workova.repositories.account_repository import AccountRepository
from workova.repositories.chat_repository import ChatRepository, MessageRepository
from workova.schemas.chat import Chat, Message

logger = get_logger(__name__)


class ChatService:
    """Handles chat lookup and message delivery."""

    def __init__(
        self,
        database: Database,
        *,
        max_message_length: int = settings.max_message_length,
        moderate_messages: bool = settings.moderate_chat_messages,
    ):
        self.database = database
        self.max_message_length = max_message_length
        self.moderate_messages = moderate_messages
        self.chat_repo = ChatRepository()
        self.message_repo = MessageRepository()
        self.account_repo = AccountRepository()

    async def get_chat(self, chat_id: str, actor_id: Optional[str] = None) -> Chat:
        """
        Raises:
            ChatNotFoundException: If the chat doesn't exist.
            NotChatMemberException: actor_id is given and isn't a member.
        """
        async with self.database.session() as db:
            chat = await self.chat_repo.get_by_id(db, chat_id)
        if not chat:
            raise ChatNotFoundException()
        if actor_id is not None and not chat.has_member(actor_id):
            raise NotChatMemberException()
        return chat

    async def send_message(self, chat_id: str, sender_id: str, text: str) -> Message:
        """
        Append a message and refresh the chat preview in one unit of work.

        Chat text only goes through the moderation filter when
        moderate_messages is on.

        Raises:
            ValidationFailedException: Empty or over-long text.
            ModerationRejectedException: Text failed the filter (when enabled).
            ChatNotFoundException: Unknown chat.
            NotChatMemberException: Sender isn't one of the two members.
        """
        text = require_text("text", text, "Message")
        if len(text) > self.max_message_length:
            raise ValidationFailedException(
                "text", f"Message must be at most {self.max_message_length} characters."
            )
        if self.moderate_messages:
            ensure_clean("text", text)

        async with self.database.unit_of_work() as db:
            chat = await self.chat_repo.get_by_id(db, chat_id)
            if not chat:
                raise ChatNotFoundException()
            if not chat.has_member(sender_id):
                raise NotChatMemberException()

            sender = await self.account_repo.get_by_id(db, sender_id)
            if not sender:
                raise AccountNotFoundException("Account not found")

            message = await self.message_repo.create(db, Message(
                chat_id=chat.id,
                sender_id=sender.id,
                sender_name=sender.display_name,
                text=text,
            ))
            await self.chat_repo.update(
                db,
                chat.id,
                last_message=message.text,
                updated_at=message.created_at,
            )

        logger.info("message_sent", chat_id=chat_id, sender_id=sender_id)
        return message
