"""Food domain: food items owned by users, each with an expiry date."""

from pantry.domain.food.entities import AllFoods, CreateFoodPayload, Food
from pantry.domain.food.exceptions import FoodNotFoundError
from pantry.domain.food.repositories import FoodRepository
from pantry.domain.food.value_objects import FoodId, FoodName

__all__ = [
    "AllFoods",
    "CreateFoodPayload",
    "Food",
    "FoodId",
    "FoodName",
    "FoodNotFoundError",
    "FoodRepository",
]
