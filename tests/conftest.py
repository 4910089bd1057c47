from datetime import timedelta

import mongomock
import pytest
from fastapi.testclient import TestClient

from recruitment_dashboard.db.mongodb import init_mongo_indexes
from recruitment_dashboard.main import app
from recruitment_dashboard.services.recruitment_store import (
    RecruitmentStore, get_recruitment_store, utcnow
)

CSE = "Computer Science and Engineering"
ISE = "Information Science and Engineering"
ECE = "Electronics & Communication Engineering"


def make_application(i: int = 0, **overrides) -> dict:
    """A valid 2nd-year application whose unique fields depend on i."""
    payload = {
        "name": f"Applicant {i}",
        "email": f"applicant{i}@gmail.com",
        "whatsapp_number": f"98765{i:05d}",
        "college_id": f"1DS21CS{i:03d}",
        "year_of_study": "2nd year",
        "branch": CSE,
        "about": "I enjoy building things and want to join the team.",
    }
    payload.update(overrides)
    return payload


def seed(collection, i: int, created_at, **overrides) -> dict:
    """Insert a record straight into the collection with a chosen createdAt."""
    doc = make_application(i, **overrides)
    doc["createdAt"] = created_at
    doc["updatedAt"] = created_at
    collection.insert_one(doc)
    return doc


@pytest.fixture
def db():
    database = mongomock.MongoClient()["recruitment_test"]
    init_mongo_indexes(database)
    return database


@pytest.fixture
def collection(db):
    return db["recruitment2025"]


@pytest.fixture
def store(collection):
    return RecruitmentStore(collection)


@pytest.fixture
def now():
    return utcnow()


@pytest.fixture
def days_ago(now):
    def _days_ago(days: float, hours: float = 0):
        return now - timedelta(days=days, hours=hours)
    return _days_ago


@pytest.fixture
def client(store):
    app.dependency_overrides[get_recruitment_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
