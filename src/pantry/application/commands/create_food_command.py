from pantry.domain.food import CreateFoodPayload, Food, FoodRepository
from pantry.domain.user import PubUserInfo


class CreateFoodCommand:
    """Command to add a food item for the acting user."""

    def __init__(self, food_repository: FoodRepository):
        self._food_repo = food_repository

    async def execute(self, payload: CreateFoodPayload, owner: PubUserInfo) -> Food:
        food = Food.create(payload, owner)
        return await self._food_repo.insert(food)
