"""Password hashing service using Argon2id.

Every hash gets a fresh random salt. The result is a PHC-formatted string
(``$argon2id$v=19$m=...,t=...,p=...$<salt>$<digest>``) carrying everything
needed to verify it later.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from argon2 import PasswordHasher as Argon2Hasher
from argon2 import Type
from argon2.exceptions import HashingError, InvalidHashError, VerificationError

from pantry_auth.exceptions import (
    PasswordHashError,
    PasswordVerificationError,
    SaltError,
)

if TYPE_CHECKING:
    from pantry_config import Settings

logger = logging.getLogger(__name__)


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses Argon2id with configurable cost parameters. Verification is
    delegated to argon2-cffi, which compares digests in constant time.

    Examples
    --------
    >>> service = PasswordHashingService(time_cost=1, memory_cost=64, parallelism=1)
    >>> hashed = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", hashed)
    """

    SALT_LENGTH = 16

    def __init__(
        self,
        time_cost: int = 3,
        memory_cost: int = 65536,
        parallelism: int = 4,
    ):
        """Initialize the password hashing service.

        Parameters
        ----------
        time_cost
            Number of Argon2 iterations.
        memory_cost
            Memory usage in KiB. Must be at least ``8 * parallelism``.
        parallelism
            Number of parallel lanes.
        """
        self._hasher = Argon2Hasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
            salt_len=self.SALT_LENGTH,
            type=Type.ID,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> PasswordHashingService:
        return cls(
            time_cost=settings.argon2_time_cost,
            memory_cost=settings.argon2_memory_cost,
            parallelism=settings.argon2_parallelism,
        )

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The encoded Argon2id hash

        Raises
        ------
        SaltError
            If no random salt could be obtained
        PasswordHashError
            If the key derivation fails
        """
        salt = self._generate_salt()
        try:
            return self._hasher.hash(password, salt=salt)
        except HashingError as e:
            logger.error("Argon2 hashing failed: %s", e)
            raise PasswordHashError from e

    def verify(self, password: str, password_hash: str) -> None:
        """Verify a password against a stored hash.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The encoded hash to verify against

        Raises
        ------
        PasswordVerificationError
            If the password does not match or the hash is malformed
        """
        try:
            self._hasher.verify(password_hash, password)
        except (VerificationError, InvalidHashError) as e:
            raise PasswordVerificationError from e

    def needs_rehash(self, password_hash: str) -> bool:
        """Check if a hash was made with different parameters than ours.

        Malformed hashes always need a rehash.
        """
        try:
            return self._hasher.check_needs_rehash(password_hash)
        except InvalidHashError:
            return True

    def _generate_salt(self) -> bytes:
        try:
            return os.urandom(self.SALT_LENGTH)
        except (NotImplementedError, OSError) as e:
            logger.error("No randomness source available for salt: %s", e)
            raise SaltError from e
