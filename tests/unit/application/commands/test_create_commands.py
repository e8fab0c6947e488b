"""Unit tests for CreateUserCommand and CreateFoodCommand."""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from pantry.application.commands import CreateFoodCommand, CreateUserCommand
from pantry.domain.food import CreateFoodPayload, Food, FoodName
from pantry.domain.shared import ConflictError
from pantry.domain.user import CreateUserPayload, PubUserInfo, User, UserId, UserName
from pantry_auth.exceptions import PasswordHashError
from tests.shared.fixtures.hashing import FailingPasswordHasher, FakePasswordHasher

OWNER = PubUserInfo(user_id=UserId("owner-1"), user_name=UserName("alice"))


def _user_payload() -> CreateUserPayload:
    return CreateUserPayload(user_name="alice", mail="a@example.com", password="secret")


class TestCreateUserCommand:
    @pytest.mark.asyncio
    async def test_inserts_hashed_user_and_returns_public_info(self):
        repo = AsyncMock()
        stored = PubUserInfo(user_id=UserId("u1"), user_name=UserName("alice"))
        repo.insert.return_value = stored
        command = CreateUserCommand(repo, FakePasswordHasher())

        result = await command.execute(_user_payload())

        assert result is stored
        repo.insert.assert_awaited_once()
        (user,) = repo.insert.await_args.args
        assert isinstance(user, User)
        assert user.password.value == "fake$terces"

    @pytest.mark.asyncio
    async def test_hash_failure_skips_insert(self):
        repo = AsyncMock()
        command = CreateUserCommand(repo, FailingPasswordHasher(PasswordHashError()))

        with pytest.raises(PasswordHashError):
            await command.execute(_user_payload())

        repo.insert.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_repository_error_propagates(self):
        repo = AsyncMock()
        repo.insert.side_effect = ConflictError("duplicate")
        command = CreateUserCommand(repo, FakePasswordHasher())

        with pytest.raises(ConflictError):
            await command.execute(_user_payload())


class TestCreateFoodCommand:
    @pytest.mark.asyncio
    async def test_inserts_food_owned_by_acting_user(self):
        repo = AsyncMock()
        repo.insert.side_effect = lambda food: food
        command = CreateFoodCommand(repo)
        payload = CreateFoodPayload(food_name="milk", exp=date(2025, 4, 8))

        result = await command.execute(payload, OWNER)

        assert isinstance(result, Food)
        assert result.user_id == OWNER.user_id
        assert result.food_name == FoodName("milk")
        assert result.exp == date(2025, 4, 8)
        repo.insert.assert_awaited_once_with(result)
