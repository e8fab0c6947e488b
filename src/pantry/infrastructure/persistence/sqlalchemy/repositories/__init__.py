# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy repository implementations."""

from pantry.infrastructure.persistence.sqlalchemy.repositories.food_repository import (
    FoodRepositorySQLAlchemy,
)
from pantry.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "FoodRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
