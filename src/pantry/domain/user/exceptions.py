"""User domain exceptions."""

from pantry.domain.shared.exceptions import EntityNotFoundError, ErrorCode


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: object) -> None:
        self.user_id = str(user_id)
        super().__init__(
            f"User not found: {self.user_id}",
            code=ErrorCode.USER_NOT_FOUND,
            details={"entity": "user", "id": self.user_id},
        )
