"""
Local store connection management.

The marketplace keeps all state in a single SQLite file accessed through
SQLAlchemy's asyncio extension. Writers are serialized by a process-wide
lock so every read-modify-write sequence runs as one critical section.
"""
import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from workova.core.config import settings
from workova.core.exceptions import StoreUnavailableException
from workova.core.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Declarative base for all SQLAlchemy models."""


class Database:
    """
    Handle on one local store.

    Usage:
        async with database.unit_of_work() as db:
            ...  # reads and writes, committed together on exit

        async with database.session() as db:
            ...  # read-only snapshot
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine = create_async_engine(url, echo=echo)
        self.session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        self.write_lock = asyncio.Lock()

    async def init(self) -> None:
        """Create tables that don't exist yet."""
        from workova.models import StoredCollection  # noqa: F401 - registers the table

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()

    async def ping(self) -> bool:
        """Return True if the store answers a trivial query."""
        try:
            async with self.session_maker() as db:
                await db.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as exc:
            logger.warning("store_ping_failed", error=str(exc))
            return False

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Read session. Sees only committed units of work."""
        async with self.session_maker() as db:
            try:
                yield db
            except SQLAlchemyError as exc:
                logger.error("store_read_failed", error=str(exc))
                raise StoreUnavailableException() from exc

    @asynccontextmanager
    async def unit_of_work(self) -> AsyncIterator[AsyncSession]:
        """
        Serialized read-modify-write session.

        Holds the write lock for the whole block. Commits on clean exit,
        rolls back on any exception so no partial write is ever visible.
        """
        async with self.write_lock:
            async with self.session_maker() as db:
                try:
                    yield db
                    await db.commit()
                except SQLAlchemyError as exc:
                    await db.rollback()
                    logger.error("store_write_failed", error=str(exc))
                    raise StoreUnavailableException() from exc
                except Exception:
                    await db.rollback()
                    raise


database = Database(settings.database_url, echo=settings.database_echo)
