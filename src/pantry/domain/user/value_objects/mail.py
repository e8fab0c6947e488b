from pantry.domain.shared.value_objects import StringValue


class Mail(StringValue):
    """Mail address of a user, stored as given."""
