"""User domain.

This domain handles:
- User entity (id, name, mail, password hash) and its public projection
- User value objects
- The user repository interface
"""

from pantry.domain.user.entities import CreateUserPayload, PubUserInfo, User
from pantry.domain.user.exceptions import UserNotFoundError
from pantry.domain.user.repositories import UserRepository
from pantry.domain.user.value_objects import Mail, Password, UserId, UserName

__all__ = [
    "CreateUserPayload",
    "Mail",
    "Password",
    "PubUserInfo",
    "User",
    "UserId",
    "UserName",
    "UserNotFoundError",
    "UserRepository",
]
