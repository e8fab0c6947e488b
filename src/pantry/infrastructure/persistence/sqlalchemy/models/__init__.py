"""SQLAlchemy models for pantry tables."""

from pantry.infrastructure.persistence.sqlalchemy.models.base import Base
from pantry.infrastructure.persistence.sqlalchemy.models.food_model import FoodModel
from pantry.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "Base",
    "FoodModel",
    "UserModel",
]
