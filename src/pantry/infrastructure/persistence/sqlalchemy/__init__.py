"""SQLAlchemy implementation for pantry persistence.

Provides:
- Base: Declarative base holding the table metadata
- UserModel / FoodModel: table models for user_table and food_table
- UserRepositorySQLAlchemy / FoodRepositorySQLAlchemy: repository implementations
- create_engine: builds the shared async engine (connection pool)
"""

from pantry.infrastructure.persistence.sqlalchemy.engine import (
    create_engine,
    enable_sqlite_foreign_keys,
)
from pantry.infrastructure.persistence.sqlalchemy.models import (
    Base,
    FoodModel,
    UserModel,
)
from pantry.infrastructure.persistence.sqlalchemy.repositories import (
    FoodRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "FoodModel",
    "FoodRepositorySQLAlchemy",
    "UserModel",
    "UserRepositorySQLAlchemy",
    "create_engine",
    "enable_sqlite_foreign_keys",
]
