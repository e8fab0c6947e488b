"""Food domain exceptions."""

from pantry.domain.shared.exceptions import EntityNotFoundError, ErrorCode


class FoodNotFoundError(EntityNotFoundError):
    """Food item not found."""

    def __init__(self, food_id: object) -> None:
        self.food_id = str(food_id)
        super().__init__(
            f"Food not found: {self.food_id}",
            code=ErrorCode.FOOD_NOT_FOUND,
            details={"entity": "food", "id": self.food_id},
        )
