"""Pantry Auth - password hashing infrastructure.

This package is independent of the pantry domain. It provides:
- Password hashing and verification (Argon2id)
- The PasswordHasher protocol injected into user construction

Architecture:
    pantry_auth/
    ├── services/           # Hashing service and capability protocol
    └── exceptions.py       # Auth exceptions
"""

from pantry_auth.exceptions import (
    AuthError,
    HashError,
    PasswordHashError,
    PasswordVerificationError,
    SaltError,
)
from pantry_auth.services import PasswordHasher, PasswordHashingService

__all__ = [
    # Services
    "PasswordHasher",
    "PasswordHashingService",
    # Exceptions
    "AuthError",
    "HashError",
    "PasswordHashError",
    "PasswordVerificationError",
    "SaltError",
]
