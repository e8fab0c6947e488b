"""
Pytest configuration for persistence unit tests.

Each test gets its own SQLite database file with the schema created and
two owner users seeded.
"""

import pytest

from pantry.infrastructure.persistence.sqlalchemy import (
    FoodRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from tests.shared.fixtures.database import sqlite_engine

__all__ = ["sqlite_engine"]


@pytest.fixture
def food_repo(sqlite_engine):
    return FoodRepositorySQLAlchemy(sqlite_engine)


@pytest.fixture
def user_repo(sqlite_engine):
    return UserRepositorySQLAlchemy(sqlite_engine)
