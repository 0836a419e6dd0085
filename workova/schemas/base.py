"""
Base schemas and common response models.
"""
import uuid
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field


def new_id() -> str:
    """Opaque unique identifier for a stored record."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class IDSchema(BaseSchema):
    """Schema mixin for a generated string ID."""

    id: str = Field(default_factory=new_id)


class CreatedSchema(BaseSchema):
    """Schema mixin for a creation timestamp."""

    created_at: datetime = Field(default_factory=utc_now)


class MessageResponse(BaseSchema):
    """Simple message response."""

    message: str
