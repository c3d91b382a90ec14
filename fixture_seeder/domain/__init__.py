"""
Domain package for the fixture seeder.

Exports the record model the fixture dataset is built from. Keep this package
focused on data definitions and document shape.
"""

from fixture_seeder.domain.models import UserFixture

__all__ = [
    "UserFixture",
]
