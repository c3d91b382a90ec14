"""
Infrastructure package for the fixture seeder.

Centralizes MongoDB connectivity (client construction, reachability check,
lifecycle). Keep this layer focused on I/O and resource management, decoupled
from the fixture data and the seeding sequence.
"""

from fixture_seeder.infrastructure.mongo_factory import (
    build_client,
    create_client,
    mongo_client,
)

__all__ = [
    "build_client",
    "create_client",
    "mongo_client",
]
