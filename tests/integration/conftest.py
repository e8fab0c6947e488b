"""
Pytest configuration for integration tests.

Integration tests use Testcontainers for an ephemeral PostgreSQL instance.
Import the shared fixtures to make them available.
"""

from tests.shared.fixtures.database import postgres_container, postgres_engine

__all__ = [
    "postgres_container",
    "postgres_engine",
]
