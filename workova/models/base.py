"""
Base model with common fields and utilities.
"""
from datetime import datetime, timezone
from sqlalchemy import DateTime, func
from sqlalchemy.orm import Mapped, mapped_column

from workova.core.database import Base


class TimestampMixin:
    """Mixin that adds an updated_at timestamp."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
        onupdate=lambda: datetime.now(timezone.utc),
    )


class BaseModel(Base, TimestampMixin):
    """
    Base model with timestamps.
    All models should inherit from this.
    """

    __abstract__ = True
