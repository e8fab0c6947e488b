"""Value objects for the user domain."""

from pantry.domain.user.value_objects.mail import Mail
from pantry.domain.user.value_objects.password import Password
from pantry.domain.user.value_objects.user_id import UserId
from pantry.domain.user.value_objects.user_name import UserName

__all__ = [
    "Mail",
    "Password",
    "UserId",
    "UserName",
]
