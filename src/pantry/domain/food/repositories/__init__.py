from pantry.domain.food.repositories.food_repository import FoodRepository

__all__ = ["FoodRepository"]
