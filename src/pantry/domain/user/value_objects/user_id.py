from pantry.domain.shared.value_objects import Identifier


class UserId(Identifier):
    """Identifier of a user account."""
