"""Authentication services.

Provides password hashing and the hashing capability protocol.
"""

from pantry_auth.services.password_hasher import PasswordHasher
from pantry_auth.services.password_service import PasswordHashingService

__all__ = [
    "PasswordHasher",
    "PasswordHashingService",
]
