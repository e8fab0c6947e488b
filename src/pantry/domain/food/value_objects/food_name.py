from pantry.domain.shared.value_objects import StringValue


class FoodName(StringValue):
    """Name of a food item."""
