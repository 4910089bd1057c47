"""
Recruitment Store - thin adapter over the application records collection.

Exposes only what the listing and analytics code need:
count, find (filter/sort/skip/limit/projection), insert, aggregate.

Driver errors never leave this module as pymongo exceptions:
- pymongo DuplicateKeyError -> errors.DuplicateKeyError (with field name)
- any other PyMongoError    -> errors.StoreError
- OverflowError from find   -> errors.StoreError (skip / limit beyond int64)
"""

import logging
import re
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any, Tuple

from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError, PyMongoError

from recruitment_dashboard.core import errors
from recruitment_dashboard.db.mongodb import get_collection, collection_names, init_mongo_indexes

logger = logging.getLogger(__name__)

UNIQUE_FIELDS = ("email", "whatsapp_number", "college_id")
INDEX_NAME_RE = re.compile(r"index: (\w+?)_1\b")


# ============================================================
# HELPER: Convert ObjectId to string for JSON serialization
# ============================================================

def serialize_doc(doc: dict) -> dict:
    """Convert MongoDB document to JSON-serializable dict."""
    if doc is None:
        return None
    if "_id" in doc:
        doc["_id"] = str(doc["_id"])
    return doc


def serialize_docs(docs: list) -> list:
    """Convert list of MongoDB documents to JSON-serializable list."""
    return [serialize_doc(doc) for doc in docs]


def utcnow() -> datetime:
    """Naive UTC now, matching what pymongo hands back for stored dates."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _duplicate_field(exc: MongoDuplicateKeyError) -> Optional[str]:
    details = exc.details or {}
    key_value = details.get("keyValue") or {}
    for field in key_value:
        return field
    # Older servers only put the index name in the message
    message = str(exc)
    match = INDEX_NAME_RE.search(message)
    if match and match.group(1) in UNIQUE_FIELDS:
        return match.group(1)
    for field in UNIQUE_FIELDS:
        if field in message:
            return field
    return None


class RecruitmentStore:
    """
    Handles application record storage.
    One instance wraps one collection handle; build it once and share it.

    Uniqueness of email / WhatsApp number / college ID is enforced by
    unique indexes, so insert() makes sure they exist before the first
    write. A failed attempt is retried on the next insert.
    """

    def __init__(self, collection: Collection = None):
        if collection is None:
            collection = get_collection(collection_names()["recruitment"])
        self.collection: Collection = collection
        self._indexes_ready = False

    def _ensure_indexes(self) -> None:
        if self._indexes_ready:
            return
        try:
            init_mongo_indexes(self.collection.database)
        except PyMongoError as exc:
            raise errors.StoreError(f"index creation failed: {exc}") from exc
        self._indexes_ready = True

    def count(self, filter: Dict[str, Any] = None) -> int:
        """Count documents matching filter (all documents when None)."""
        try:
            return self.collection.count_documents(filter or {})
        except PyMongoError as exc:
            raise errors.StoreError(f"count failed: {exc}") from exc

    def find(
        self,
        filter: Dict[str, Any] = None,
        sort: List[Tuple[str, int]] = None,
        skip: int = 0,
        limit: int = 0,
        projection: List[str] = None
    ) -> List[dict]:
        """
        Fetch documents as JSON-ready dicts.

        Args:
            filter: MongoDB filter document
            sort: [(field, 1 | -1)]
            skip: documents to skip
            limit: max documents (0 = no limit)
            projection: field names to return (_id is always included)
        """
        fields = {name: 1 for name in projection} if projection else None
        try:
            cursor = self.collection.find(filter or {}, fields)
            if sort:
                cursor = cursor.sort(sort)
            if skip:
                cursor = cursor.skip(skip)
            if limit:
                cursor = cursor.limit(limit)
            return serialize_docs(list(cursor))
        # skip / limit beyond int64 fail in BSON encoding, outside PyMongoError
        except (PyMongoError, OverflowError) as exc:
            raise errors.StoreError(f"find failed: {exc}") from exc

    def insert(self, record: dict, now: datetime = None) -> dict:
        """
        Insert a validated application. Stamps createdAt/updatedAt.

        Returns:
            The stored document with _id as string.
        """
        self._ensure_indexes()
        now = now or utcnow()
        doc = dict(record)
        doc["createdAt"] = now
        doc["updatedAt"] = now
        try:
            result = self.collection.insert_one(doc)
        except MongoDuplicateKeyError as exc:
            field = _duplicate_field(exc)
            logger.info("Rejected duplicate application (field=%s)", field)
            raise errors.DuplicateKeyError(field) from exc
        except PyMongoError as exc:
            raise errors.StoreError(f"insert failed: {exc}") from exc
        doc["_id"] = result.inserted_id
        return serialize_doc(doc)

    def aggregate(self, pipeline: List[Dict[str, Any]]) -> List[dict]:
        """Run an aggregation pipeline and return all result documents."""
        try:
            return list(self.collection.aggregate(pipeline))
        except PyMongoError as exc:
            raise errors.StoreError(f"aggregate failed: {exc}") from exc


# Global store (one per process, shares the pooled client)
_store: RecruitmentStore = None


def get_recruitment_store() -> RecruitmentStore:
    """
    FastAPI dependency - the store bound to the shared client.

    Usage:
        @router.get("")
        async def list_(store: RecruitmentStore = Depends(get_recruitment_store)):
            ...
    """
    global _store
    if _store is None:
        _store = RecruitmentStore()
    return _store


def reset_recruitment_store() -> None:
    """Drop the shared store. Called on shutdown together with the client."""
    global _store
    _store = None
