from pantry.domain.food.entities.food import AllFoods, CreateFoodPayload, Food

__all__ = [
    "AllFoods",
    "CreateFoodPayload",
    "Food",
]
