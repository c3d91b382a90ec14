"""
Pytest configuration for the fixture seeder.

Provides fixtures for:
- An in-memory stand-in for a MongoDB client (unit tests)
- Real MongoDB connection management (integration tests)
- Settings override for integration tests
"""

from __future__ import annotations

import copy
import os
from typing import Any, Dict, Generator, Iterator, List, Optional

import pytest
from pymongo import MongoClient
from pymongo.errors import DuplicateKeyError, PyMongoError, ServerSelectionTimeoutError

from fixture_seeder.config import Settings, get_settings

TEST_DATABASE_NAME = "migration_examples_test"


class FakeInsertManyResult:
    def __init__(self, inserted_ids: List[Any]) -> None:
        self.inserted_ids = inserted_ids
        self.acknowledged = True


class FakeDatabase:
    def __init__(self, client: "FakeClient", name: str) -> None:
        self.client = client
        self.name = name
        self._collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> "FakeCollection":
        if name not in self._collections:
            self._collections[name] = FakeCollection(self, name)
        return self._collections[name]


class FakeCollection:
    """
    The slice of `pymongo.collection.Collection` the seeder relies on.

    Documents are deep-copied on the way in and out, like a real store.
    """

    def __init__(self, database: FakeDatabase, name: str) -> None:
        self.database = database
        self.name = name
        self.documents: List[Dict[str, Any]] = []
        self.insert_many_calls = 0

    @property
    def full_name(self) -> str:
        return f"{self.database.name}.{self.name}"

    def insert_many(self, documents: List[Dict[str, Any]]) -> FakeInsertManyResult:
        self.insert_many_calls += 1
        existing = {doc["_id"] for doc in self.documents}
        for doc in documents:
            if doc["_id"] in existing:
                raise DuplicateKeyError(f"E11000 duplicate key error: {doc['_id']}")
            existing.add(doc["_id"])
        self.documents.extend(copy.deepcopy(doc) for doc in documents)
        return FakeInsertManyResult([doc["_id"] for doc in documents])

    def count_documents(self, filter: Dict[str, Any]) -> int:
        assert filter == {}, "only the empty filter is supported"
        return len(self.documents)

    def find(
        self, filter: Dict[str, Any], projection: Optional[Dict[str, int]] = None
    ) -> Iterator[Dict[str, Any]]:
        assert filter == {}, "only the empty filter is supported"
        for doc in self.documents:
            if projection is None:
                yield copy.deepcopy(doc)
                continue
            keep = {key for key, flag in projection.items() if flag and key != "_id"}
            if projection.get("_id", 1):
                keep.add("_id")
            yield {key: copy.deepcopy(value) for key, value in doc.items() if key in keep}


class FakeClient:
    def __init__(self) -> None:
        self._databases: Dict[str, FakeDatabase] = {}
        self.closed = False

    def __getitem__(self, name: str) -> FakeDatabase:
        if name not in self._databases:
            self._databases[name] = FakeDatabase(self, name)
        return self._databases[name]

    def close(self) -> None:
        self.closed = True


class FailingCollection(FakeCollection):
    """Collection whose every operation fails like an unreachable server."""

    def __init__(self, error: PyMongoError) -> None:
        super().__init__(FakeDatabase(FakeClient(), "migration_examples"), "users")
        self.error = error

    def insert_many(self, documents: List[Dict[str, Any]]) -> FakeInsertManyResult:
        self.insert_many_calls += 1
        raise self.error

    def count_documents(self, filter: Dict[str, Any]) -> int:
        raise self.error


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def fake_collection(fake_client: FakeClient) -> FakeCollection:
    return fake_client["migration_examples"]["users"]


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Generator[None, None, None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.

    Can be overridden via environment variables in CI or local testing.
    """
    return Settings(
        mongo_url=os.getenv("MONGO_URL", "mongodb://localhost:27017"),
        mongo_username=os.getenv("MONGO_USERNAME"),
        mongo_password=os.getenv("MONGO_PASSWORD"),
        mongo_timeout_seconds=int(os.getenv("MONGO_TIMEOUT", "5")),
        log_level="DEBUG",
    )


@pytest.fixture(scope="session")
def mongo_available(test_settings: Settings) -> bool:
    """
    Check if MongoDB is reachable.

    Used to conditionally skip integration tests when the server is not available.
    """
    client: MongoClient = MongoClient(
        test_settings.connection_string(), serverSelectionTimeoutMS=2000
    )
    try:
        client.admin.command("ping")
        return True
    except PyMongoError:
        return False
    finally:
        client.close()


@pytest.fixture(scope="session")
def mongo_connection(
    test_settings: Settings, mongo_available: bool
) -> Generator[MongoClient, None, None]:
    """
    Provide a session-scoped client for integration tests.

    Skips tests if MongoDB is not available.
    """
    if not mongo_available:
        pytest.skip("MongoDB not available for integration tests")

    client: MongoClient = MongoClient(test_settings.connection_string(), tz_aware=True)
    try:
        yield client
    finally:
        client.close()


@pytest.fixture(scope="function")
def clean_test_database(mongo_connection: MongoClient) -> Generator[str, None, None]:
    """
    Drop the test database before and after each test function.

    Yields the database name to seed into.
    """
    mongo_connection.drop_database(TEST_DATABASE_NAME)
    yield TEST_DATABASE_NAME
    mongo_connection.drop_database(TEST_DATABASE_NAME)


@pytest.fixture
def unreachable_collection() -> FailingCollection:
    return FailingCollection(ServerSelectionTimeoutError("localhost:27017: connection refused"))
