"""
Fixture seeder - loads a fixed set of sample users into MongoDB.

The five records deliberately disagree on shape so that data migrations can be
exercised against them:

- Email casing varies (upper-case, upper-case domain, lower-case)
- `first_name` and `last_name` are each missing from a different record
- Only one record carries `updated_at`

Seeding inserts the records in one batch into `migration_examples.users`, then
reports the collection count and a projection of every document.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from fixture_seeder.config import Settings, get_settings
from fixture_seeder.domain.models import UserFixture
from fixture_seeder.fixtures import FIXTURE_COUNT, build_user_fixtures, fixture_documents
from fixture_seeder.seeder import (
    COLLECTION_NAME,
    DATABASE_NAME,
    REPORT_PROJECTION,
    SeedReport,
    report,
    run_seed,
    seed,
)
from fixture_seeder.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Fixture data
    "FIXTURE_COUNT",
    "UserFixture",
    "build_user_fixtures",
    "fixture_documents",
    # Seeding
    "COLLECTION_NAME",
    "DATABASE_NAME",
    "REPORT_PROJECTION",
    "SeedReport",
    "report",
    "run_seed",
    "seed",
    # Logging
    "configure_logging",
    "get_logger",
]
