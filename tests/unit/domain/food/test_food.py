"""Unit tests for the Food entity and the per-owner collection."""

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from pantry.domain.food import AllFoods, CreateFoodPayload, Food, FoodId, FoodName
from pantry.domain.user import PubUserInfo, UserId, UserName

OWNER = PubUserInfo(user_id=UserId("owner-1"), user_name=UserName("alice"))


class TestCreateFoodPayload:
    def test_parses_iso_date(self):
        payload = CreateFoodPayload(food_name="milk", exp="2025-04-08")

        assert payload.food_name == FoodName("milk")
        assert payload.exp == date(2025, 4, 8)

    def test_datetime_expiry_truncated_to_date(self):
        payload = CreateFoodPayload(food_name="milk", exp=datetime(2025, 4, 8, 13, 30))

        assert payload.exp == date(2025, 4, 8)
        assert type(payload.exp) is date

    def test_invalid_date_rejected(self):
        with pytest.raises(ValidationError):
            CreateFoodPayload(food_name="milk", exp="not-a-date")


class TestFood:
    def test_create_assigns_owner_and_fresh_id(self):
        payload = CreateFoodPayload(food_name="milk", exp=date(2025, 4, 8))

        food = Food.create(payload, OWNER)

        assert isinstance(food.food_id, FoodId)
        assert food.food_name == FoodName("milk")
        assert food.exp == date(2025, 4, 8)
        assert food.user_id == OWNER.user_id

    def test_create_twice_gives_distinct_ids(self):
        payload = CreateFoodPayload(food_name="milk", exp=date(2025, 4, 8))

        first = Food.create(payload, OWNER)
        second = Food.create(payload, OWNER)

        assert first.food_id != second.food_id

    def test_datetime_expiry_truncated_to_date(self):
        food = Food(
            food_id=FoodId("f1"),
            food_name=FoodName("milk"),
            exp=datetime(2025, 4, 8, 17, 30),
            user_id=OWNER.user_id,
        )

        assert food.exp == date(2025, 4, 8)
        assert type(food.exp) is date

    def test_equality_by_fields(self):
        def make():
            return Food(FoodId("f1"), FoodName("milk"), date(2025, 4, 8), UserId("u"))

        assert make() == make()


class TestAllFoods:
    def test_empty_by_default(self):
        foods = AllFoods(user_id=OWNER.user_id)

        assert len(foods) == 0
        assert list(foods) == []

    def test_iterates_in_given_order(self):
        first = Food(FoodId("f1"), FoodName("milk"), date(2025, 4, 8), OWNER.user_id)
        second = Food(FoodId("f2"), FoodName("eggs"), date(2025, 4, 9), OWNER.user_id)

        foods = AllFoods(user_id=OWNER.user_id, foods=(second, first))

        assert len(foods) == 2
        assert list(foods) == [second, first]
