# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Sets test environment variables before any app import and provides an
# in-memory stand-in for the Motor database so that neither the seed tests
# nor the API tests need a running MongoDB.
# =============================================================================

import copy
import os

os.environ.setdefault("DATABASE_URL", "mongodb://localhost:27017/employee_management_test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest
from bson import ObjectId
from httpx import ASGITransport, AsyncClient
from pymongo import ReturnDocument
from pymongo.errors import WriteError


# =============================================================================
# In-memory collection
# =============================================================================

class Result:
    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)


def matches(document, query):
    for field, condition in query.items():
        value = document.get(field)
        if isinstance(condition, dict) and "$in" in condition:
            if value not in condition["$in"]:
                return False
        elif value != condition:
            return False
    return True


class FakeCursor:
    def __init__(self, documents):
        self._documents = documents

    def skip(self, count):
        self._documents = self._documents[count:]
        return self

    def limit(self, count):
        if count:
            self._documents = self._documents[:count]
        return self

    async def to_list(self, length=None):
        documents = self._documents if length is None else self._documents[:length]
        return copy.deepcopy(documents)


class FakeCollection:
    """Subset of AsyncIOMotorCollection used by the application."""

    def __init__(self, name):
        self.name = name
        self.documents = []
        self.indexes = []

    def _find(self, query):
        for document in self.documents:
            if matches(document, query or {}):
                return document
        return None

    def _apply(self, document, update, inserting):
        if "$set" in update:
            new_id = update["$set"].get("_id", document.get("_id"))
            if not inserting and "_id" in document and new_id != document["_id"]:
                raise WriteError("Performing an update on the path '_id' would modify the immutable field '_id'")
            document.update(copy.deepcopy(update["$set"]))
        if inserting and "$setOnInsert" in update:
            document.update(copy.deepcopy(update["$setOnInsert"]))
        for field, amount in update.get("$inc", {}).items():
            document[field] = document.get(field, 0) + amount

    def _upsert(self, query, update, upsert):
        document = self._find(query)
        if document is not None:
            self._apply(document, update, inserting=False)
            return document, False
        if not upsert:
            return None, False
        document = {
            field: value for field, value in query.items() if not isinstance(value, dict)
        }
        self._apply(document, update, inserting=True)
        document.setdefault("_id", ObjectId())
        self.documents.append(document)
        return document, True

    async def create_index(self, keys, **kwargs):
        self.indexes.append((keys, kwargs))
        return kwargs.get("name")

    async def find_one(self, query=None):
        return copy.deepcopy(self._find(query))

    def find(self, query=None):
        return FakeCursor([d for d in self.documents if matches(d, query or {})])

    async def count_documents(self, query):
        return len([d for d in self.documents if matches(d, query)])

    async def update_one(self, query, update, upsert=False):
        document, inserted = self._upsert(query, update, upsert)
        return Result(
            matched_count=0 if inserted or document is None else 1,
            upserted_id=document["_id"] if inserted else None,
        )

    async def find_one_and_update(self, query, update, upsert=False, return_document=ReturnDocument.BEFORE):
        before = copy.deepcopy(self._find(query))
        document, _ = self._upsert(query, update, upsert)
        if return_document == ReturnDocument.AFTER:
            return copy.deepcopy(document)
        return before

    async def insert_one(self, document):
        document = copy.deepcopy(document)
        document.setdefault("_id", ObjectId())
        self.documents.append(document)
        return Result(inserted_id=document["_id"])

    async def delete_one(self, query):
        document = self._find(query)
        if document is None:
            return Result(deleted_count=0)
        self.documents.remove(document)
        return Result(deleted_count=1)


class FakeDatabase:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]

    def snapshot(self):
        return {
            name: sorted(copy.deepcopy(collection.documents), key=lambda d: str(d["_id"]))
            for name, collection in self.collections.items()
        }


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
async def client(fake_db):
    from app.database import get_database
    from app.main import app

    async def override_get_database():
        return fake_db

    app.dependency_overrides[get_database] = override_get_database
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def api_prefix():
    from app.config import get_settings
    return get_settings().API_PREFIX


@pytest.fixture
def write_export(tmp_path):
    """Write a JSON export file named after a collection into tmp_path."""
    import json

    def _write(collection, data):
        path = tmp_path / f"{collection}.json"
        path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
        return path

    return _write
