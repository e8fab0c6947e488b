"""User repository interface."""

from abc import ABC

from pantry.domain.shared.repositories import Writer
from pantry.domain.user.entities import PubUserInfo, User
from pantry.domain.user.value_objects import UserId


class UserRepository(Writer[User, UserId, PubUserInfo], ABC):
    """Repository interface for users.

    Reads and write read-backs return ``PubUserInfo``; mail and password
    are written but never read back through this interface.
    """
