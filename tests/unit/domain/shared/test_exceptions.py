"""Unit tests for the repository error hierarchy."""

import pytest

from pantry.domain.food import FoodNotFoundError
from pantry.domain.shared import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    RepositoryError,
    StorageUnavailableError,
)
from pantry.domain.user import UserNotFoundError


class TestRepositoryErrors:
    @pytest.mark.parametrize(
        "error",
        [
            FoodNotFoundError("f1"),
            UserNotFoundError("u1"),
            ConflictError("dup"),
            StorageUnavailableError(),
        ],
    )
    def test_all_are_repository_errors(self, error):
        """Catching RepositoryError covers every failure kind."""
        assert isinstance(error, RepositoryError)
        assert isinstance(error, DomainException)

    def test_food_not_found_carries_id(self):
        error = FoodNotFoundError("f1")

        assert isinstance(error, EntityNotFoundError)
        assert error.code == ErrorCode.FOOD_NOT_FOUND
        assert error.food_id == "f1"
        assert error.details == {"entity": "food", "id": "f1"}
        assert str(error) == "Food not found: f1"

    def test_user_not_found_carries_id(self):
        error = UserNotFoundError("u1")

        assert error.code == ErrorCode.USER_NOT_FOUND
        assert error.details["id"] == "u1"

    def test_storage_unavailable_default_message(self):
        error = StorageUnavailableError()

        assert error.message == "Storage is unavailable"
        assert error.code == ErrorCode.STORAGE_UNAVAILABLE
        assert error.details == {}

    def test_repr_includes_code(self):
        error = ConflictError("dup", details={"id": "x"})

        assert repr(error) == (
            "ConflictError(message='dup', code='CONFLICT', details={'id': 'x'})"
        )
