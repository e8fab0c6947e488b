"""SQLAlchemy implementation of FoodRepository."""

import logging

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import RowMapping

from pantry.domain.food import (
    AllFoods,
    Food,
    FoodId,
    FoodName,
    FoodNotFoundError,
    FoodRepository,
)
from pantry.domain.user import PubUserInfo, UserId
from pantry.infrastructure.persistence.sqlalchemy.models import FoodModel
from pantry.infrastructure.persistence.sqlalchemy.repositories.base import (
    SQLAlchemyRepositoryBase,
)

logger = logging.getLogger(__name__)


class FoodRepositorySQLAlchemy(SQLAlchemyRepositoryBase, FoodRepository):
    """SQLAlchemy implementation of the FoodRepository interface."""

    entity_name = "food"
    not_found_error = FoodNotFoundError

    _COLUMNS = (
        FoodModel.food_id,
        FoodModel.food_name,
        FoodModel.exp,
        FoodModel.user_id,
    )

    async def read(self, id: FoodId) -> Food:
        stmt = select(*self._COLUMNS).where(FoodModel.food_id == id.value)
        row = await self._fetch_one(stmt, id)
        return self._map_to_domain(row)

    async def read_all(self, owner_id: UserId | PubUserInfo) -> AllFoods:
        user_id = owner_id.user_id if isinstance(owner_id, PubUserInfo) else owner_id

        # No ORDER BY: callers get store order
        stmt = select(*self._COLUMNS).where(FoodModel.user_id == user_id.value)
        rows = await self._fetch_all(stmt, user_id)
        return AllFoods(
            user_id=user_id,
            foods=tuple(self._map_to_domain(row) for row in rows),
        )

    async def insert_row(self, payload: Food) -> FoodId:
        stmt = insert(FoodModel).values(
            food_id=payload.food_id.value,
            food_name=payload.food_name.value,
            exp=payload.exp,
            user_id=payload.user_id.value,
        )
        await self._write(stmt, payload.food_id, require_match=False)
        logger.debug("Created food %s for user %s", payload.food_id, payload.user_id)
        return payload.food_id

    async def update_row(self, id: FoodId, payload: Food) -> None:
        # Ownership is fixed at creation; only name and expiry change
        stmt = (
            update(FoodModel)
            .where(FoodModel.food_id == id.value)
            .values(
                food_name=payload.food_name.value,
                exp=payload.exp,
            )
        )
        await self._write(stmt, id)
        logger.debug("Updated food: %s", id)

    async def delete(self, id: FoodId) -> None:
        stmt = delete(FoodModel).where(FoodModel.food_id == id.value)
        await self._write(stmt, id)
        logger.debug("Deleted food: %s", id)

    def _map_to_domain(self, row: RowMapping) -> Food:
        return Food(
            food_id=FoodId(row["food_id"]),
            food_name=FoodName(row["food_name"]),
            exp=row["exp"],
            user_id=UserId(row["user_id"]),
        )
