"""
Utilities package for the fixture seeder.

Exports shared helpers for logging and other cross-cutting concerns.
Keep this package lightweight and free of fixture-specific logic.
"""

from fixture_seeder.utils.logging import JsonFormatter, configure_logging, get_logger

__all__ = [
    "JsonFormatter",
    "configure_logging",
    "get_logger",
]
