"""SQLAlchemy model for users."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pantry.infrastructure.persistence.sqlalchemy.models.base import Base


class UserModel(Base):
    """Row of ``user_table``. ``password`` stores the encoded hash."""

    __tablename__ = "user_table"

    user_id: Mapped[str] = mapped_column(String(40), primary_key=True)
    user_name: Mapped[str] = mapped_column(String(255), nullable=False)
    mail: Mapped[str] = mapped_column(String(255), nullable=False)
    password: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<UserModel(user_id={self.user_id}, user_name={self.user_name})>"
