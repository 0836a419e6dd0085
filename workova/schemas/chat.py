"""
Chat and message schemas.
"""
from datetime import datetime
from typing import Dict, List
from pydantic import Field
from workova.schemas.base import BaseSchema, CreatedSchema, IDSchema, utc_now


class Chat(IDSchema):
    """
    Two-party conversation scoped to one job.

    At most one chat exists per (job_id, {member, member}). job_title and
    member_names are snapshots taken when the chat is opened.
    """

    job_id: str
    job_title: str
    members: List[str]
    member_names: Dict[str, str] = Field(default_factory=dict)
    last_message: str = ""
    updated_at: datetime = Field(default_factory=utc_now)

    def has_member(self, account_id: str) -> bool:
        return account_id in self.members

    def other_member(self, account_id: str) -> str:
        return next((m for m in self.members if m != account_id), "")


class Message(IDSchema, CreatedSchema):
    """Append-only chat message."""

    chat_id: str
    sender_id: str
    sender_name: str
    text: str


class MessageCreate(BaseSchema):
    """Send-message request body."""

    text: str
