"""
Base repository with generic CRUD operations over one stored collection.

All entity-specific repositories inherit from this. Every mutating method
reads the collection, changes it and writes it back through the session it
is given; the caller's unit of work decides when that becomes visible.
"""
from typing import Any, Callable, Generic, List, Optional, Type, TypeVar

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from workova.core.logging import get_logger
from workova.core.storage import load_collection, save_collection
from workova.schemas.base import BaseSchema

logger = get_logger(__name__)

# Generic type for stored record schemas
RecordType = TypeVar("RecordType", bound=BaseSchema)


class CollectionRepository(Generic[RecordType]):
    """
    Base repository providing standard CRUD operations.

    Usage:
        class JobRepository(CollectionRepository[Job]):
            def __init__(self):
                super().__init__(JOBS, Job)
    """

    def __init__(
        self,
        collection: str,
        schema: Type[RecordType],
        key: str = "id",
    ):
        self.collection = collection
        self.schema = schema
        self.key = key

    async def get_all(
        self,
        db: AsyncSession,
    ) -> List[RecordType]:
        """Load every record. A record failing validation empties the collection."""
        raw = await load_collection(db, self.collection)
        try:
            return [self.schema.model_validate(item) for item in raw]
        except ValidationError as exc:
            logger.warning(
                "collection_malformed",
                collection=self.collection,
                problem="invalid_record",
                errors=exc.error_count(),
            )
            return []

    async def save_all(
        self,
        db: AsyncSession,
        records: List[RecordType],
    ) -> None:
        """Replace the collection with records."""
        await save_collection(
            db,
            self.collection,
            [r.model_dump(mode="json") for r in records],
        )

    async def get_by_id(
        self,
        db: AsyncSession,
        id: str,
    ) -> Optional[RecordType]:
        """Get a single record by key."""
        for record in await self.get_all(db):
            if getattr(record, self.key) == id:
                return record
        return None

    async def find(
        self,
        db: AsyncSession,
        predicate: Callable[[RecordType], bool],
    ) -> List[RecordType]:
        """Records matching predicate, in stored order."""
        return [r for r in await self.get_all(db) if predicate(r)]

    async def create(
        self,
        db: AsyncSession,
        record: RecordType,
    ) -> RecordType:
        """Append a new record."""
        records = await self.get_all(db)
        records.append(record)
        await self.save_all(db, records)
        return record

    async def upsert(
        self,
        db: AsyncSession,
        record: RecordType,
    ) -> RecordType:
        """Replace the record with the same key, or append it."""
        records = await self.get_all(db)
        key = getattr(record, self.key)
        for i, existing in enumerate(records):
            if getattr(existing, self.key) == key:
                records[i] = record
                break
        else:
            records.append(record)
        await self.save_all(db, records)
        return record

    async def update(
        self,
        db: AsyncSession,
        id: str,
        **changes: Any,
    ) -> Optional[RecordType]:
        """Apply changes to one record. Returns None if it doesn't exist."""
        records = await self.get_all(db)
        for i, record in enumerate(records):
            if getattr(record, self.key) == id:
                records[i] = record.model_copy(update=changes)
                await self.save_all(db, records)
                return records[i]
        return None

    async def update_where(
        self,
        db: AsyncSession,
        predicate: Callable[[RecordType], bool],
        **changes: Any,
    ) -> int:
        """Apply the same changes to every matching record in one write."""
        records = await self.get_all(db)
        touched = 0
        for i, record in enumerate(records):
            if predicate(record):
                records[i] = record.model_copy(update=changes)
                touched += 1
        if touched:
            await self.save_all(db, records)
        return touched

    async def delete(
        self,
        db: AsyncSession,
        id: str,
    ) -> bool:
        """Hard delete a record by key."""
        return await self.delete_where(db, lambda r: getattr(r, self.key) == id) > 0

    async def delete_where(
        self,
        db: AsyncSession,
        predicate: Callable[[RecordType], bool],
    ) -> int:
        """Hard delete every matching record. Returns how many were removed."""
        records = await self.get_all(db)
        kept = [r for r in records if not predicate(r)]
        removed = len(records) - len(kept)
        if removed:
            await self.save_all(db, kept)
        return removed
