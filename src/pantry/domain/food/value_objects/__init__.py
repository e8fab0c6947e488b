"""Value objects for the food domain."""

from pantry.domain.food.value_objects.food_id import FoodId
from pantry.domain.food.value_objects.food_name import FoodName

__all__ = [
    "FoodId",
    "FoodName",
]
