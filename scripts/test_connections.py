#!/usr/bin/env python3
"""
Connection Test Script

Run this to verify MongoDB is reachable and indexes can be created.
Usage: python scripts/test_connections.py
"""
import sys
sys.path.insert(0, '.')

from recruitment_dashboard.db.mongodb import (
    test_mongo_connection, init_mongo_indexes, get_mongo_db, collection_names
)
from recruitment_dashboard.core.config import get_settings


def main():
    settings = get_settings()
    print("=" * 50)
    print("RECRUITMENT DASHBOARD - CONNECTION TEST")
    print("=" * 50)

    print("\n[1] Testing MongoDB...")
    print(f"    URI: {settings.mongodb_uri}")
    print(f"    Database: {settings.mongodb_db}")
    if not test_mongo_connection():
        print("    ❌ MongoDB: FAILED")
        return
    print("    ✅ MongoDB: CONNECTED")

    print("\n[2] Creating indexes...")
    init_mongo_indexes()
    db = get_mongo_db()
    for key, name in collection_names().items():
        indexes = sorted(db[name].index_information())
        print(f"    ✅ {key} ({name}): {', '.join(indexes)}")

    print("\n" + "=" * 50)
    print("Connection test complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
