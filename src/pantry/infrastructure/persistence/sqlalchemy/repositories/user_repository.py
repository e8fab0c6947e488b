"""SQLAlchemy implementation of UserRepository."""

import logging

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import RowMapping

from pantry.domain.user import (
    PubUserInfo,
    User,
    UserId,
    UserName,
    UserNotFoundError,
    UserRepository,
)
from pantry.infrastructure.persistence.sqlalchemy.models import UserModel
from pantry.infrastructure.persistence.sqlalchemy.repositories.base import (
    SQLAlchemyRepositoryBase,
)

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(SQLAlchemyRepositoryBase, UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    entity_name = "user"
    not_found_error = UserNotFoundError

    async def read(self, id: UserId) -> PubUserInfo:
        stmt = select(UserModel.user_id, UserModel.user_name).where(
            UserModel.user_id == id.value,
        )
        row = await self._fetch_one(stmt, id)
        return self._map_to_public(row)

    async def insert_row(self, payload: User) -> UserId:
        stmt = insert(UserModel).values(
            user_id=payload.user_id.value,
            user_name=payload.user_name.value,
            mail=payload.mail.value,
            password=payload.password.value,
        )
        await self._write(stmt, payload.user_id, require_match=False)
        logger.info("Created user: %s", payload.user_id)
        return payload.user_id

    async def update_row(self, id: UserId, payload: User) -> None:
        stmt = (
            update(UserModel)
            .where(UserModel.user_id == id.value)
            .values(
                user_name=payload.user_name.value,
                mail=payload.mail.value,
                password=payload.password.value,
            )
        )
        await self._write(stmt, id)
        logger.debug("Updated user: %s", id)

    async def delete(self, id: UserId) -> None:
        stmt = delete(UserModel).where(UserModel.user_id == id.value)
        await self._write(stmt, id)
        logger.info("Deleted user: %s", id)

    def _map_to_public(self, row: RowMapping) -> PubUserInfo:
        return PubUserInfo(
            user_id=UserId(row["user_id"]),
            user_name=UserName(row["user_name"]),
        )
