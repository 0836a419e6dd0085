"""
Chat repository - data access for Chat and Message entities.
"""
from typing import Iterable, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from workova.models.collection import CHATS, MESSAGES
from workova.repositories.base import CollectionRepository
from workova.schemas.chat import Chat, Message


class ChatRepository(CollectionRepository[Chat]):
    def __init__(self):
        super().__init__(CHATS, Chat)

    async def find_by_job_and_members(
        self,
        db: AsyncSession,
        job_id: str,
        members: Iterable[str],
    ) -> Optional[Chat]:
        """The chat for this job between exactly these members, if any."""
        wanted = set(members)
        for chat in await self.get_all(db):
            if chat.job_id == job_id and set(chat.members) == wanted:
                return chat
        return None

    async def list_for_user(
        self,
        db: AsyncSession,
        account_id: str,
    ) -> List[Chat]:
        """Chats the account belongs to, most recently active first."""
        chats = await self.find(db, lambda c: c.has_member(account_id))
        chats.sort(key=lambda c: c.updated_at, reverse=True)
        return chats


class MessageRepository(CollectionRepository[Message]):
    def __init__(self):
        super().__init__(MESSAGES, Message)

    async def list_for_chat(
        self,
        db: AsyncSession,
        chat_id: str,
    ) -> List[Message]:
        """Messages in a chat, oldest first."""
        messages = await self.find(db, lambda m: m.chat_id == chat_id)
        messages.sort(key=lambda m: m.created_at)
        return messages
