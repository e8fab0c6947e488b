"""Hashing capability accepted by user construction."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class PasswordHasher(Protocol):
    """Anything that turns a plaintext password into a storable hash.

    Implementations raise ``HashError`` on failure and never return the
    plaintext or an empty string.
    """

    def hash(self, password: str) -> str: ...
