"""
MongoDB Connection Utility

MongoDB stores:
- Application records submitted through the recruitment form
- Ephemeral OTP verification entries (written by the notification service,
  expired by a TTL index)

The client is created lazily on first use and reused for every request
(pymongo keeps its own connection pool). close_mongo_client() is called
on shutdown.
"""
import logging

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from pymongo.collection import Collection
from recruitment_dashboard.core.config import get_settings

logger = logging.getLogger(__name__)

# Global client (connection pooling handled internally by pymongo)
_client: MongoClient = None
_db: Database = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        settings = get_settings()
        _client = MongoClient(
            settings.mongodb_uri,
            serverSelectionTimeoutMS=settings.mongodb_timeout_ms
        )
    return _client


def get_mongo_db() -> Database:
    """Get the recruitment database"""
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[get_settings().mongodb_db]
    return _db


def get_collection(name: str) -> Collection:
    """
    Get a specific collection.
    Collections we'll use:
    - recruitment: Application records
    - verification: Temporary OTP entries
    """
    db = get_mongo_db()
    return db[name]


def close_mongo_client() -> None:
    """Close the pooled client. The next get_mongo_client() reconnects."""
    global _client, _db
    if _client is not None:
        try:
            _client.close()
        finally:
            _client = None
            _db = None


def test_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client = get_mongo_client()
        # ping command checks connection
        client.admin.command('ping')
        return True
    except Exception as e:
        logger.warning("MongoDB connection failed: %s", e)
        return False


def collection_names() -> dict:
    """Collection name constants (avoid typos), resolved from settings."""
    settings = get_settings()
    return {
        "recruitment": settings.recruitment_collection,
        "verification": settings.verification_collection,
    }


def init_mongo_indexes(db: Database = None):
    """
    Create indexes for uniqueness and TTL expiry.
    Call this once during app startup.
    """
    db = db if db is not None else get_mongo_db()
    names = collection_names()

    # One application per email / phone / college ID
    recruitment = db[names["recruitment"]]
    recruitment.create_index("email", unique=True)
    recruitment.create_index("whatsapp_number", unique=True)
    recruitment.create_index("college_id", unique=True)

    # Listing and analytics filter on these
    recruitment.create_index([("createdAt", ASCENDING)])
    recruitment.create_index([("branch", ASCENDING), ("createdAt", ASCENDING)])
    recruitment.create_index("year_of_study")

    # OTP entries vanish as soon as otpExpiresAt passes
    verification = db[names["verification"]]
    verification.create_index("email", unique=True)
    verification.create_index("otpExpiresAt", expireAfterSeconds=0)

    logger.info("MongoDB indexes created successfully")
