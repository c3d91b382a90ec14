"""
Seeding sequence: build the fixture set, insert it, then count and project.

Everything runs once, synchronously, against an injected client. Nothing here
clears the collection first, deduplicates, or retries: seeding twice without
clearing doubles the data, and any pymongo error propagates to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.results import InsertManyResult
from rich.console import Console

from fixture_seeder.domain.models import UserFixture
from fixture_seeder.fixtures import build_user_fixtures
from fixture_seeder.reporter import print_report
from fixture_seeder.utils.logging import get_logger

DATABASE_NAME = "migration_examples"
COLLECTION_NAME = "users"

REPORT_FIELDS: Tuple[str, ...] = ("email", "first_name", "last_name", "status")
# _id is returned by default and has to be switched off explicitly
REPORT_PROJECTION: Dict[str, int] = {"_id": 0, **{name: 1 for name in REPORT_FIELDS}}

log = get_logger(__name__)


@dataclass(frozen=True)
class SeedReport:
    """
    Post-insert view of the target collection.

    `total_documents` counts the whole collection, not only what this run inserted.
    """

    database: str
    collection: str
    total_documents: int
    records: Tuple[Dict[str, Any], ...] = ()


def seed(
    collection: Collection,
    fixtures: Optional[Iterable[UserFixture]] = None,
) -> InsertManyResult:
    """
    Insert the fixture documents into `collection` as a single batch.

    Parameters
    ----------
    collection : Collection
        Target collection.
    fixtures : Iterable[UserFixture], optional
        Records to insert; a freshly built fixture set when omitted.

    Returns
    -------
    InsertManyResult
        The driver's acknowledgement, including the inserted ids.
    """
    if fixtures is None:
        fixtures = build_user_fixtures()
    documents = [fixture.to_document() for fixture in fixtures]

    log.info(
        "Inserting %d fixture documents into %s.%s",
        len(documents),
        collection.database.name,
        collection.name,
        extra={"documents": len(documents), "collection": collection.full_name},
    )
    return collection.insert_many(documents)


def report(collection: Collection) -> SeedReport:
    """
    Count every document in `collection` and project the reported fields.

    Records come back in natural storage order; no sort is applied.
    """
    total = collection.count_documents({})
    log.debug("Collection %s holds %d documents", collection.full_name, total)
    records = tuple(dict(doc) for doc in collection.find({}, REPORT_PROJECTION))
    return SeedReport(
        database=collection.database.name,
        collection=collection.name,
        total_documents=total,
        records=records,
    )


def run_seed(
    client: MongoClient,
    database_name: str = DATABASE_NAME,
    collection_name: str = COLLECTION_NAME,
    console: Optional[Console] = None,
) -> SeedReport:
    """
    Seed the fixture set into `database_name.collection_name` and print a summary.
    """
    collection = client[database_name][collection_name]
    result = seed(collection)
    summary = report(collection)
    print_report(summary, inserted=len(result.inserted_ids), console=console)
    return summary


__all__ = [
    "COLLECTION_NAME",
    "DATABASE_NAME",
    "REPORT_FIELDS",
    "REPORT_PROJECTION",
    "SeedReport",
    "report",
    "run_seed",
    "seed",
]
