"""Shared fixtures: an in-memory stand-in for a MongoDB collection."""

import copy
import re
from types import SimpleNamespace
from typing import Any

import pytest
from bson import ObjectId
from pymongo.errors import PyMongoError


class FakeCursor:
    """Async-iterable result of FakeCollection.find."""

    def __init__(self, documents: list[dict]):
        self._documents = documents

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for document in self._documents:
            yield document


def _matches(document: dict, filter_doc: dict) -> bool:
    """Evaluate the subset of the MongoDB query language the app produces."""
    for key, condition in filter_doc.items():
        if key == "$or":
            if not any(_matches(document, sub) for sub in condition):
                return False
        elif isinstance(condition, dict) and "$regex" in condition:
            flags = re.IGNORECASE if "i" in condition.get("$options", "") else 0
            value = document.get(key)
            if not isinstance(value, str) or not re.search(condition["$regex"], value, flags):
                return False
        elif document.get(key) != condition:
            return False
    return True


class FakeCollection:
    """In-memory collection recording every call made to it.

    Set ``fail_with`` to an exception to make every operation raise it.
    """

    def __init__(self, name: str = "article"):
        self.name = name
        self.documents: list[dict] = []
        self.calls: list[tuple[str, Any]] = []
        self.fail_with: Exception | None = None

    def _record(self, operation: str, *args: Any) -> None:
        self.calls.append((operation, args))
        if self.fail_with is not None:
            raise self.fail_with

    def find(self, filter_doc: dict) -> FakeCursor:
        self._record("find", filter_doc)
        return FakeCursor(
            [copy.deepcopy(d) for d in self.documents if _matches(d, filter_doc)]
        )

    async def insert_one(self, document: dict) -> SimpleNamespace:
        self._record("insert_one", document)
        stored = copy.deepcopy(document)
        stored.setdefault("_id", ObjectId())
        self.documents.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])

    async def update_one(self, filter_doc: dict, update: dict) -> SimpleNamespace:
        self._record("update_one", filter_doc, update)
        for index, document in enumerate(self.documents):
            if _matches(document, filter_doc):
                merged = {**document, **update["$set"]}
                modified = int(merged != document)
                self.documents[index] = merged
                return SimpleNamespace(matched_count=1, modified_count=modified)
        return SimpleNamespace(matched_count=0, modified_count=0)

    async def delete_one(self, filter_doc: dict) -> SimpleNamespace:
        self._record("delete_one", filter_doc)
        for index, document in enumerate(self.documents):
            if _matches(document, filter_doc):
                del self.documents[index]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)


class FakeDatabase:
    """Database handle handing out FakeCollections by name."""

    def __init__(self):
        self.collections: dict[str, FakeCollection] = {}
        self.ping_error: Exception | None = None

    def __getitem__(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection(name))

    async def command(self, name: str) -> dict:
        if self.ping_error is not None:
            raise self.ping_error
        return {"ok": 1.0}


@pytest.fixture
def fake_database() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def fake_collection(fake_database: FakeDatabase) -> FakeCollection:
    return fake_database["article"]


@pytest.fixture
def storage_failure() -> PyMongoError:
    return PyMongoError("connection refused")
