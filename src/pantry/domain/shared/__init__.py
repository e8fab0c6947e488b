"""Building blocks shared by the food and user domains."""

from pantry.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    RepositoryError,
    StorageUnavailableError,
)
from pantry.domain.shared.repositories import AllReader, TargetReader, Writer
from pantry.domain.shared.value_objects import Identifier, StringValue

__all__ = [
    "AllReader",
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "Identifier",
    "RepositoryError",
    "StorageUnavailableError",
    "StringValue",
    "TargetReader",
    "Writer",
]
