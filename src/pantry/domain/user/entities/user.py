"""User entity, its public projection and its create payload."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from pantry.domain.user.value_objects import Mail, Password, UserId, UserName
from pantry_auth.exceptions import PasswordHashError

if TYPE_CHECKING:
    from pantry_auth.services import PasswordHasher


class CreateUserPayload(BaseModel):
    """Data needed to register a user. ``password`` is plaintext."""

    model_config = ConfigDict(frozen=True)

    user_name: UserName
    mail: Mail
    password: Password


@dataclass(frozen=True)
class PubUserInfo:
    """Redacted view of a user, safe to hand to any caller."""

    user_id: UserId
    user_name: UserName


@dataclass(frozen=True)
class User:
    """
    A stored user account.

    ``password`` holds the encoded hash, never the plaintext supplied at
    registration. Build new users with ``create``.
    """

    user_id: UserId
    user_name: UserName
    mail: Mail
    password: Password

    @classmethod
    def create(
        cls,
        payload: CreateUserPayload,
        password_hasher: PasswordHasher,
    ) -> User:
        """Build a new user with a fresh id and a hashed password.

        Any ``HashError`` from the hasher propagates; no user is built.
        A hasher that returns an empty string or the plaintext itself is
        treated as a failed hash.
        """
        plaintext = payload.password.value
        password_hash = password_hasher.hash(plaintext)
        if not password_hash or password_hash == plaintext:
            raise PasswordHashError("Hasher returned an unusable password hash")
        return cls(
            user_id=UserId.generate(),
            user_name=payload.user_name,
            mail=payload.mail,
            password=Password(password_hash),
        )

    def to_public(self) -> PubUserInfo:
        return PubUserInfo(user_id=self.user_id, user_name=self.user_name)
