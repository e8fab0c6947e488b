"""Food entity, its create payload and the per-owner collection."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, field_validator

from pantry.domain.food.value_objects import FoodId, FoodName
from pantry.domain.user import PubUserInfo, UserId


class CreateFoodPayload(BaseModel):
    """Data needed to add a food item for the acting user."""

    model_config = ConfigDict(frozen=True)

    food_name: FoodName
    exp: date

    @field_validator("exp", mode="before")
    @classmethod
    def _truncate_datetime(cls, v: object) -> object:
        # exp is a calendar date, a time of day is dropped
        if isinstance(v, datetime):
            return v.date()
        return v


@dataclass(frozen=True)
class Food:
    """A food item with its expiry date, owned by exactly one user."""

    food_id: FoodId
    food_name: FoodName
    exp: date
    user_id: UserId

    def __post_init__(self) -> None:
        # exp is a calendar date, never a point in time
        if isinstance(self.exp, datetime):
            object.__setattr__(self, "exp", self.exp.date())

    @classmethod
    def create(cls, payload: CreateFoodPayload, owner: PubUserInfo) -> Food:
        return cls(
            food_id=FoodId.generate(),
            food_name=payload.food_name,
            exp=payload.exp,
            user_id=owner.user_id,
        )


@dataclass(frozen=True)
class AllFoods:
    """Foods owned by one user, in whatever order the store returned them."""

    user_id: UserId
    foods: tuple[Food, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[Food]:
        return iter(self.foods)

    def __len__(self) -> int:
        return len(self.foods)
