"""
MongoDB client factory for the fixture seeder.

Builds a `MongoClient` from settings and confirms the server is reachable with a
`ping` before handing it out. Establishing the connection is retried for
transient failures using tenacity; the seeding operations themselves never are.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator, Optional

from pymongo import MongoClient
from pymongo.errors import ConnectionFailure
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from fixture_seeder.config import Settings, get_settings
from fixture_seeder.utils.logging import get_logger

log = get_logger(__name__)


def build_client(settings: Optional[Settings] = None) -> MongoClient:
    """
    Construct a client without contacting the server.

    pymongo connects lazily, so this never fails on an unreachable host.
    """
    settings = settings or get_settings()
    return MongoClient(
        settings.connection_string(),
        serverSelectionTimeoutMS=settings.mongo_timeout_ms,
        connectTimeoutMS=settings.mongo_timeout_ms,
        tz_aware=True,
    )


@retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=10),
    retry=retry_if_exception_type(ConnectionFailure),
    before_sleep=before_sleep_log(log, logging.WARNING),
    reraise=True,
)
def create_client(settings: Optional[Settings] = None) -> MongoClient:
    """
    Create a client and verify connectivity with automatic retry.

    Retries up to 3 times with exponential backoff when the server cannot be
    reached (`ConnectionFailure`, which includes server selection timeouts).

    Returns
    -------
    MongoClient
        A connected client. The caller owns it and must close it.

    Raises
    ------
    pymongo.errors.ConnectionFailure
        If the server is still unreachable after all attempts.
    """
    client = build_client(settings)
    try:
        client.admin.command("ping")
    except BaseException:
        client.close()
        raise
    return client


@contextmanager
def mongo_client(settings: Optional[Settings] = None) -> Generator[MongoClient, None, None]:
    """
    Context manager yielding a connected client that is closed on exit.

    Example
    -------
        with mongo_client() as client:
            client["migration_examples"]["users"].count_documents({})
    """
    client = create_client(settings)
    try:
        yield client
    finally:
        client.close()


__all__ = ["build_client", "create_client", "mongo_client"]
