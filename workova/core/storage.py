"""
Collection store - durable mapping from collection name to a JSON array.

Every write replaces the whole collection. Writes made inside one session
become visible to other sessions together when that session commits.

Malformed payloads never raise: they read as an empty collection so a
corrupted row can't take the marketplace down.
"""
import json
from datetime import datetime, timezone
from typing import Any, Dict, List

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from workova.core.logging import get_logger
from workova.models.collection import StoredCollection

logger = get_logger(__name__)


async def load_collection(
    db: AsyncSession,
    name: str,
) -> List[Dict[str, Any]]:
    """Return the records stored under name, or [] if absent or malformed."""
    row = await db.get(StoredCollection, name)
    if row is None or not row.payload:
        return []

    try:
        records = json.loads(row.payload)
    except ValueError:
        logger.warning("collection_malformed", collection=name, problem="invalid_json")
        return []

    if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
        logger.warning("collection_malformed", collection=name, problem="not_a_record_list")
        return []

    return records


async def save_collection(
    db: AsyncSession,
    name: str,
    records: List[Dict[str, Any]],
) -> None:
    """Replace the whole collection. Flushed now, committed by the caller."""
    payload = json.dumps(records, ensure_ascii=False)
    row = await db.get(StoredCollection, name)
    if row is None:
        db.add(StoredCollection(name=name, payload=payload))
    else:
        row.payload = payload
        row.updated_at = datetime.now(timezone.utc)
    await db.flush()


async def clear_collections(db: AsyncSession) -> None:
    """Drop every stored collection."""
    await db.execute(delete(StoredCollection))
    await db.flush()
    logger.info("collections_cleared")
