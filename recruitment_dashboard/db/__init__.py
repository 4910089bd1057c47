"""
Database module - MongoDB connection lifecycle.
"""
from recruitment_dashboard.db.mongodb import (
    get_mongo_db,
    test_mongo_connection,
    close_mongo_client,
    init_mongo_indexes,
)

__all__ = [
    "get_mongo_db",
    "test_mongo_connection",
    "close_mongo_client",
    "init_mongo_indexes",
]
