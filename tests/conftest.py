"""Shared test fixtures."""

from datetime import date, timedelta

import pytest

from nutrition_coach.config import Settings
from nutrition_coach.containers import AppContainer, build_container
from nutrition_coach.domain.analysis import CoachingContext, EatingPattern
from nutrition_coach.domain.meals import LoggedMeal, MealType, NutritionGoals
from nutrition_coach.domain.progress import (
    CalorieProgress,
    DailyProgress,
    MacroBreakdown,
    MacroProgress,
    ProgressStatus,
    WeeklyTrend,
)
from nutrition_coach.services.progress import remaining_targets

GOALS = NutritionGoals(daily_calories=2000, protein_g=150, carbs_g=200, fats_g=67)

# 2024-01-01 is a Monday.
MONDAY = date(2024, 1, 1)


def day_key(offset: int) -> str:
    """ISO date ``offset`` days after the reference Monday."""
    return (MONDAY + timedelta(days=offset)).isoformat()


def make_meal(  # noqa: PLR0913
    day: str,
    calories: float = 2000,
    protein_g: float = 150,
    carbs_g: float = 200,
    fats_g: float = 67,
    meal_type: MealType = MealType.LUNCH,
) -> LoggedMeal:
    return LoggedMeal(
        date=day,
        meal_type=meal_type,
        calories=calories,
        protein_g=protein_g,
        carbs_g=carbs_g,
        fats_g=fats_g,
    )


def make_day(  # noqa: PLR0913
    day: str = "2024-01-01",
    calorie_ratio: float = 1.0,
    protein_ratio: float = 1.0,
    carbs_ratio: float = 1.0,
    fats_ratio: float = 1.0,
    goals: NutritionGoals = GOALS,
) -> DailyProgress:
    consumed = goals.daily_calories * calorie_ratio
    if 0.95 <= calorie_ratio <= 1.05:
        status = ProgressStatus.MET
    elif calorie_ratio > 1.05:
        status = ProgressStatus.OVER
    else:
        status = ProgressStatus.UNDER
    return DailyProgress(
        date=day,
        calories=CalorieProgress(
            consumed=consumed,
            goal=goals.daily_calories,
            remaining=max(0.0, goals.daily_calories - consumed),
            percentage=calorie_ratio,
        ),
        macros=MacroBreakdown(
            protein=_macro(goals.protein_g, protein_ratio),
            carbs=_macro(goals.carbs_g, carbs_ratio),
            fats=_macro(goals.fats_g, fats_ratio),
        ),
        status=status,
    )


def make_week(
    start: str, average_calories: float, goal_adherence: float
) -> WeeklyTrend:
    return WeeklyTrend(
        week_start_date=start,
        average_calories=average_calories,
        goal_adherence=goal_adherence,
        total_days=7,
        days_met_goal=round(goal_adherence * 7 / 100),
    )


def make_context(  # noqa: PLR0913
    today: DailyProgress | None = None,
    goals: NutritionGoals = GOALS,
    hour: int = 12,
    adherence: float = 0.7,
    patterns: list[EatingPattern] | None = None,
    meals: list[LoggedMeal] | None = None,
    weekend_variance: float = 0.0,
) -> CoachingContext:
    resolved_today = today or make_day()
    return CoachingContext(
        goals=goals,
        today=resolved_today,
        remaining=remaining_targets(resolved_today, goals, hour),
        adherence_score=adherence,
        current_hour=hour,
        patterns=patterns or [],
        recent_meals=meals or [],
        weekend_variance=weekend_variance,
    )


def _macro(goal: float, ratio: float) -> MacroProgress:
    return MacroProgress(consumed=goal * ratio, goal=goal, percentage=ratio)


@pytest.fixture
def goals() -> NutritionGoals:
    return GOALS


@pytest.fixture
def week_on_target() -> list[LoggedMeal]:
    """Seven days, one meal a day, exactly at every goal."""
    return [make_meal(day_key(offset)) for offset in range(7)]


@pytest.fixture
def settings() -> Settings:
    return Settings(api_token=None, default_timezone="UTC")


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)
