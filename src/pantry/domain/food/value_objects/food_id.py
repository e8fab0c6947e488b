from pantry.domain.shared.value_objects import Identifier


class FoodId(Identifier):
    """Identifier of a food item."""
