"""Tests for meal aggregation."""

import pytest

from nutrition_coach.domain.meals import MealType
from nutrition_coach.services.aggregation import (
    aggregate_by_meal_type,
    aggregate_daily,
    daily_meal_counts,
    macro_totals,
    round_half_up,
    split_weekday_weekend,
)
from tests.conftest import day_key, make_meal


def test_aggregate_daily_sums_meals_per_date() -> None:
    meals = [
        make_meal("2024-01-01", calories=500, protein_g=30),
        make_meal("2024-01-02", calories=700, protein_g=40),
        make_meal("2024-01-01", calories=300, protein_g=20),
    ]

    totals = aggregate_daily(meals)

    assert list(totals) == ["2024-01-01", "2024-01-02"]
    assert totals["2024-01-01"].calories == 800
    assert totals["2024-01-01"].protein_g == 50
    assert totals["2024-01-01"].meal_count == 2
    assert totals["2024-01-02"].meal_count == 1


def test_aggregate_by_meal_type_groups_meals() -> None:
    meals = [
        make_meal("2024-01-01", meal_type=MealType.BREAKFAST),
        make_meal("2024-01-01", meal_type=MealType.DINNER),
        make_meal("2024-01-02", meal_type=MealType.BREAKFAST),
    ]

    grouped = aggregate_by_meal_type(meals)

    assert len(grouped[MealType.BREAKFAST]) == 2
    assert len(grouped[MealType.DINNER]) == 1
    assert MealType.SNACK not in grouped


def test_split_weekday_weekend_uses_calendar_days() -> None:
    meals = [
        make_meal(day_key(0), calories=1000),
        make_meal(day_key(0), calories=500),
        make_meal(day_key(4), calories=1800),
        make_meal(day_key(5), calories=2500),
        make_meal(day_key(6), calories=2600),
    ]

    split = split_weekday_weekend(meals)

    assert split.weekday == [1500, 1800]
    assert split.weekend == [2500, 2600]


def test_daily_meal_counts_and_macro_totals() -> None:
    meals = [
        make_meal("2024-01-01", calories=400, fats_g=10),
        make_meal("2024-01-01", calories=600, fats_g=20),
        make_meal("2024-01-02", calories=900, fats_g=30),
    ]

    assert daily_meal_counts(meals) == [2.0, 1.0]
    totals = macro_totals(meals)
    assert totals.calories == 1900
    assert totals.fats_g == 60
    assert totals.meal_count == 3


@pytest.mark.parametrize(
    ("value", "expected"),
    [(12.5, 13), (13.5, 14), (0.5, 1), (2.4999, 2), (1399.6, 1400), (0.0, 0)],
)
def test_round_half_up(value: float, expected: int) -> None:
    assert round_half_up(value) == expected
