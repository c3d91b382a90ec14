"""
The fixed user dataset seeded into `migration_examples.users`.

Five records exercising the normalization cases a migration has to cope with:
three email casing styles (upper-case everything, upper-case domain only, all
lower-case), a record without `last_name`, a different record without
`first_name`, and a single record carrying `updated_at`. Absent fields are simply
not passed to the model so they never reach the stored document.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Tuple

from bson import ObjectId

from fixture_seeder.domain.models import UserFixture

FIXTURE_COUNT = 5


def _utc(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


def build_user_fixtures() -> Tuple[UserFixture, ...]:
    """
    Build the five sample users, each with a freshly generated ObjectId.

    Records are ordered by `created_at`.
    """
    return (
        UserFixture(
            id=ObjectId(),
            email="JOHN.DOE@EXAMPLE.COM",
            first_name="John",
            last_name="Doe",
            status="active",
            created_at=_utc("2024-01-01T10:00:00"),
        ),
        UserFixture(
            id=ObjectId(),
            email="jane.smith@EXAMPLE.COM",
            first_name="Jane",
            last_name="Smith",
            status="inactive",
            created_at=_utc("2024-01-02T14:30:00"),
        ),
        UserFixture(
            id=ObjectId(),
            email="bob.johnson@example.com",
            first_name="Bob",
            last_name="Johnson",
            status="active",
            created_at=_utc("2024-01-03T09:15:00"),
            updated_at=_utc("2024-01-03T09:15:00"),
        ),
        UserFixture(
            id=ObjectId(),
            email="ALICE.WILLIAMS@EXAMPLE.COM",
            first_name="Alice",
            status="pending",
            created_at=_utc("2024-01-04T16:45:00"),
        ),
        UserFixture(
            id=ObjectId(),
            email="charlie.brown@example.com",
            last_name="Brown",
            status="active",
            created_at=_utc("2024-01-05T11:20:00"),
        ),
    )


def fixture_documents() -> List[Dict[str, Any]]:
    """Insert-ready documents for a fresh fixture set."""
    return [fixture.to_document() for fixture in build_user_fixtures()]


__all__ = ["FIXTURE_COUNT", "build_user_fixtures", "fixture_documents"]
