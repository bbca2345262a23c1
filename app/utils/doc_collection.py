"""Thin wrapper over a MongoDB collection used by every concept."""

import logging
from datetime import UTC, datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection

logger = logging.getLogger(__name__)

Filter = Dict[str, Any]
SortSpec = Sequence[Tuple[str, int]]


class DocCollection:
    """One document collection with per-document atomic operations.

    There are no multi-document transactions. List fields are changed with
    ``$addToSet``/``$pull`` so concurrent writers never overwrite each other's
    elements.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection
        self.name = collection.name

    async def create_one(self, item: Dict[str, Any]) -> ObjectId:
        """Insert a document and return its generated id."""
        now = datetime.now(UTC)
        document = {**item, "created_at": now, "updated_at": now}
        document.pop("_id", None)
        result = await self.collection.insert_one(document)
        logger.debug(f"Inserted document {result.inserted_id} into {self.name}")
        return result.inserted_id

    async def read_one(self, filter: Filter) -> Optional[Dict[str, Any]]:
        return await self.collection.find_one(filter)

    async def read_many(
        self, filter: Filter, sort: Optional[SortSpec] = None
    ) -> List[Dict[str, Any]]:
        cursor = self.collection.find(filter, sort=list(sort) if sort else None)
        return await cursor.to_list(length=None)

    async def partial_update_one(self, filter: Filter, update: Dict[str, Any]) -> bool:
        """Set the given fields on the first matching document.

        Returns whether a document matched.
        """
        changes = {**update, "updated_at": datetime.now(UTC)}
        result = await self.collection.update_one(filter, {"$set": changes})
        return result.matched_count > 0

    async def upsert_one(self, filter: Filter, update: Dict[str, Any]) -> bool:
        """Set the given fields, creating the document if none matches.

        Returns True when a new document was created.
        """
        now = datetime.now(UTC)
        result = await self.collection.update_one(
            filter,
            {"$set": {**update, "updated_at": now}, "$setOnInsert": {"created_at": now}},
            upsert=True,
        )
        return result.upserted_id is not None

    async def add_to_set(self, filter: Filter, field: str, value: Any) -> bool:
        """Append ``value`` to the list ``field`` unless it is already there."""
        result = await self.collection.update_one(
            filter,
            {"$addToSet": {field: value}, "$set": {"updated_at": datetime.now(UTC)}},
        )
        return result.matched_count > 0

    async def pull(self, filter: Filter, field: str, value: Any) -> bool:
        """Remove every occurrence of ``value`` from the list ``field``."""
        result = await self.collection.update_one(
            filter,
            {"$pull": {field: value}, "$set": {"updated_at": datetime.now(UTC)}},
        )
        return result.matched_count > 0

    async def delete_one(self, filter: Filter) -> bool:
        result = await self.collection.delete_one(filter)
        return result.deleted_count > 0

    async def delete_many(self, filter: Filter) -> int:
        result = await self.collection.delete_many(filter)
        return result.deleted_count
