"""
StoredCollection model - one row per logical collection.

The marketplace persists each collection (users, jobs, offers, ...) as a
single JSON document, replaced wholesale on every write.
"""
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from workova.models.base import BaseModel

# Logical collection names
USERS = "users"
WORKERS = "workers"
JOBS = "jobs"
OFFERS = "offers"
CHATS = "chats"
MESSAGES = "messages"
REPORTS = "reports"
SESSION = "session"


class StoredCollection(BaseModel):
    """
    Serialized collection.

    payload holds a JSON array of records. Anything else found there is
    treated as an empty collection by the storage layer.
    """

    __tablename__ = "collections"

    name: Mapped[str] = mapped_column(String(64), primary_key=True)
    payload: Mapped[str] = mapped_column(Text, nullable=False, default="[]")

    def __repr__(self) -> str:
        return f"<StoredCollection {self.name}>"
