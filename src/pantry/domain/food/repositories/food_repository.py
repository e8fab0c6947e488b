"""Food repository interface."""

from abc import ABC

from pantry.domain.food.entities import AllFoods, Food
from pantry.domain.food.value_objects import FoodId
from pantry.domain.shared.repositories import AllReader, Writer
from pantry.domain.user import PubUserInfo, UserId


class FoodRepository(
    Writer[Food, FoodId, Food],
    AllReader[UserId | PubUserInfo, AllFoods],
    ABC,
):
    """Repository interface for food items.

    ``read_all`` is scoped to one owner and accepts either the owner's
    ``UserId`` or their ``PubUserInfo``.
    """
