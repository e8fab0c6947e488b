"""SQLAlchemy model for food items."""

from datetime import date

from sqlalchemy import Date, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pantry.infrastructure.persistence.sqlalchemy.models.base import Base


class FoodModel(Base):
    """Row of ``food_table``; rows go away with their owning user."""

    __tablename__ = "food_table"

    food_id: Mapped[str] = mapped_column(String(40), primary_key=True)
    food_name: Mapped[str] = mapped_column(Text, nullable=False)
    exp: Mapped[date] = mapped_column(Date, nullable=False)
    user_id: Mapped[str] = mapped_column(
        String(40),
        ForeignKey("user_table.user_id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<FoodModel(food_id={self.food_id}, user_id={self.user_id})>"
