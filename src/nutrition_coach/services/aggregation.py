"""Grouping and summation of logged meals."""

import math
from dataclasses import dataclass
from datetime import date

from nutrition_coach.domain.meals import LoggedMeal, MealType

_WEEKEND_DAYS = {5, 6}


@dataclass(frozen=True)
class DayTotals:
    """Summed calories and macros for one day."""

    date: str
    calories: float
    protein_g: float
    carbs_g: float
    fats_g: float
    meal_count: int


@dataclass(frozen=True)
class WeekSplit:
    """Per-day calorie totals split by weekday and weekend."""

    weekday: list[float]
    weekend: list[float]


def aggregate_daily(meals: list[LoggedMeal]) -> dict[str, DayTotals]:
    """Return totals per date, in order of first appearance."""
    totals: dict[str, DayTotals] = {}
    for meal in meals:
        current = totals.get(meal.date) or DayTotals(
            date=meal.date,
            calories=0,
            protein_g=0,
            carbs_g=0,
            fats_g=0,
            meal_count=0,
        )
        totals[meal.date] = DayTotals(
            date=meal.date,
            calories=current.calories + meal.calories,
            protein_g=current.protein_g + meal.protein_g,
            carbs_g=current.carbs_g + meal.carbs_g,
            fats_g=current.fats_g + meal.fats_g,
            meal_count=current.meal_count + 1,
        )
    return totals


def aggregate_by_meal_type(meals: list[LoggedMeal]) -> dict[MealType, list[LoggedMeal]]:
    """Group meals by their meal type."""
    grouped: dict[MealType, list[LoggedMeal]] = {}
    for meal in meals:
        grouped.setdefault(meal.meal_type, []).append(meal)
    return grouped


def split_weekday_weekend(meals: list[LoggedMeal]) -> WeekSplit:
    """Split per-day calorie totals into weekdays and weekends."""
    weekday: list[float] = []
    weekend: list[float] = []
    for day, totals in aggregate_daily(meals).items():
        if date.fromisoformat(day).weekday() in _WEEKEND_DAYS:
            weekend.append(totals.calories)
        else:
            weekday.append(totals.calories)
    return WeekSplit(weekday=weekday, weekend=weekend)


def daily_calorie_totals(meals: list[LoggedMeal]) -> list[float]:
    """Return the calorie total of each logged day."""
    return [totals.calories for totals in aggregate_daily(meals).values()]


def daily_meal_counts(meals: list[LoggedMeal]) -> list[float]:
    """Return the number of meals logged on each day."""
    return [float(totals.meal_count) for totals in aggregate_daily(meals).values()]


def macro_totals(meals: list[LoggedMeal]) -> DayTotals:
    """Sum every meal into a single totals record."""
    return DayTotals(
        date="",
        calories=sum(meal.calories for meal in meals),
        protein_g=sum(meal.protein_g for meal in meals),
        carbs_g=sum(meal.carbs_g for meal in meals),
        fats_g=sum(meal.fats_g for meal in meals),
        meal_count=len(meals),
    )


def mean(values: list[float]) -> float:
    """Arithmetic mean, 0 for an empty list."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up, for display."""
    return math.floor(value + 0.5)
