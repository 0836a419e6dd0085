"""
Chat routes.
"""
from typing import List

from fastapi import APIRouter, Depends, Request, status

from workova.api.deps import get_chat_service, get_current_account, get_feed_service
from workova.core.rate_limit import RATE_WRITE, limiter
from workova.schemas.account import Account
from workova.schemas.chat import Chat, Message, MessageCreate
from workova.services.chat_service import ChatService
from workova.services.feed_service import FeedService

router = APIRouter(prefix="/chats", tags=["chats"])


@router.get("", response_model=List[Chat])
async def list_chats(
    current_account: Account = Depends(get_current_account),
    feed_service: FeedService = Depends(get_feed_service),
):
    """The acting account's chats, most recently active first."""
    return await feed_service.chats_for_user(current_account.id)


@router.get("/{chat_id}", response_model=Chat)
async def get_chat(
    chat_id: str,
    current_account: Account = Depends(get_current_account),
    chat_service: ChatService = Depends(get_chat_service),
):
    return await chat_service.get_chat(chat_id, current_account.id)


@router.get("/{chat_id}/messages", response_model=List[Message])
async def list_messages(
    chat_id: str,
    current_account: Account = Depends(get_current_account),
    chat_service: ChatService = Depends(get_chat_service),
    feed_service: FeedService = Depends(get_feed_service),
):
    """Messages oldest first."""
    await chat_service.get_chat(chat_id, current_account.id)
    return await feed_service.messages_for_chat(chat_id)


@router.post("/{chat_id}/messages", response_model=Message, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_WRITE)
async def send_message(
    request: Request,
    chat_id: str,
    body: MessageCreate,
    current_account: Account = Depends(get_current_account),
    chat_service: ChatService = Depends(get_chat_service),
):
    return await chat_service.send_message(chat_id, current_account.id, body.text)
