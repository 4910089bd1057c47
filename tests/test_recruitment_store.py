from datetime import datetime
from unittest import mock

import mongomock
import pytest
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError, PyMongoError

from recruitment_dashboard.core import errors
from recruitment_dashboard.services import recruitment_store
from recruitment_dashboard.services.recruitment_store import RecruitmentStore, _duplicate_field

from conftest import make_application


def test_insert_stamps_timestamps_and_serializes_id(store):
    stamp = datetime(2026, 10, 1, 12, 0, 0)
    record = store.insert(make_application(1), now=stamp)
    assert isinstance(record["_id"], str)
    assert record["createdAt"] == stamp
    assert record["updatedAt"] == stamp
    assert store.count() == 1


@pytest.mark.parametrize("field", ["email", "whatsapp_number", "college_id"])
def test_second_insert_with_same_unique_field_is_duplicate(store, field):
    first = make_application(1)
    store.insert(first)

    second = make_application(2)
    second[field] = first[field]
    with pytest.raises(errors.DuplicateKeyError):
        store.insert(second)

    assert store.count() == 1


def test_find_sorts_skips_limits_and_projects(store):
    for i in range(5):
        store.insert(make_application(i), now=datetime(2026, 10, 1 + i))

    docs = store.find(sort=[("createdAt", -1)], skip=1, limit=2, projection=["name"])
    assert [d["name"] for d in docs] == ["Applicant 3", "Applicant 2"]
    assert set(docs[0]) == {"_id", "name"}


def test_driver_failures_become_store_errors():
    collection = mock.MagicMock()
    collection.count_documents.side_effect = PyMongoError("connection refused")
    collection.find.side_effect = PyMongoError("connection refused")
    collection.insert_one.side_effect = PyMongoError("connection refused")
    collection.aggregate.side_effect = PyMongoError("connection refused")
    store = RecruitmentStore(collection)

    with pytest.raises(errors.StoreError):
        store.count()
    with pytest.raises(errors.StoreError):
        store.find()
    with pytest.raises(errors.StoreError):
        store.insert(make_application(1))
    with pytest.raises(errors.StoreError):
        store.aggregate([])


def test_insert_creates_missing_unique_indexes():
    # Nothing created the indexes at startup
    collection = mongomock.MongoClient()["recruitment_test"]["recruitment2025"]
    store = RecruitmentStore(collection)
    store.insert(make_application(1))

    with pytest.raises(errors.DuplicateKeyError):
        store.insert(make_application(2, college_id="1DS21CS001"))

    assert store.count() == 1
    assert "college_id_1" in collection.index_information()


def test_insert_refused_until_indexes_exist(collection):
    store = RecruitmentStore(collection)
    failing_then_ok = mock.Mock(side_effect=[PyMongoError("not primary"), None])

    with mock.patch.object(recruitment_store, "init_mongo_indexes", failing_then_ok):
        with pytest.raises(errors.StoreError):
            store.insert(make_application(1))
        assert store.count() == 0

        store.insert(make_application(1))
        store.insert(make_application(2))

    assert failing_then_ok.call_count == 2
    assert store.count() == 2


def test_find_with_oversized_skip_is_store_error():
    collection = mock.MagicMock()
    collection.find.return_value.skip.side_effect = OverflowError("MongoDB can only handle up to 8-byte ints")
    store = RecruitmentStore(collection)

    with pytest.raises(errors.StoreError):
        store.find(skip=10 ** 19)


def test_duplicate_field_from_key_value_details():
    exc = MongoDuplicateKeyError(
        "E11000 duplicate key error", 11000,
        details={"keyValue": {"college_id": "1DS21CS001"}}
    )
    assert _duplicate_field(exc) == "college_id"


def test_duplicate_field_from_index_name_in_message():
    exc = MongoDuplicateKeyError(
        "E11000 duplicate key error collection: recruitment.recruitment2025 "
        "index: whatsapp_number_1 dup key: { : \"9876500001\" }",
        11000
    )
    assert _duplicate_field(exc) == "whatsapp_number"


def test_duplicate_field_unknown_index():
    exc = MongoDuplicateKeyError("E11000 duplicate key error index: _id_", 11000)
    assert _duplicate_field(exc) is None


def test_insert_reports_duplicate_field_from_driver_error():
    collection = mock.MagicMock()
    collection.insert_one.side_effect = MongoDuplicateKeyError(
        "E11000 duplicate key error", 11000,
        details={"keyValue": {"email": "applicant1@gmail.com"}}
    )
    store = RecruitmentStore(collection)

    with pytest.raises(errors.DuplicateKeyError) as exc_info:
        store.insert(make_application(1))

    assert exc_info.value.field == "email"
