from pantry.domain.shared.value_objects import StringValue


class UserName(StringValue):
    """Display name of a user."""
