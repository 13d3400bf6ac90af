"""Tests for daily progress and weekly trend calculation."""

from datetime import date

import pytest

from nutrition_coach.domain.meals import NutritionGoals
from nutrition_coach.domain.progress import ProgressStatus, TimeOfDay
from nutrition_coach.services.progress import (
    build_daily_progress,
    build_weekly_trends,
    classify_time_of_day,
    remaining_targets,
)
from tests.conftest import GOALS, make_meal


@pytest.mark.parametrize(
    ("calories", "status"),
    [
        (1899, ProgressStatus.UNDER),
        (1900, ProgressStatus.MET),
        (2100, ProgressStatus.MET),
        (2101, ProgressStatus.OVER),
    ],
)
def test_status_boundaries(calories: float, status: ProgressStatus) -> None:
    meals = [make_meal("2024-01-01", calories=calories)]

    progress = build_daily_progress("2024-01-01", meals, GOALS)

    assert progress.status == status


def test_daily_progress_sums_only_that_day() -> None:
    meals = [
        make_meal("2024-01-01", calories=600, protein_g=50),
        make_meal("2024-01-01", calories=400, protein_g=25),
        make_meal("2024-01-02", calories=900, protein_g=80),
    ]

    progress = build_daily_progress("2024-01-01", meals, GOALS)

    assert progress.calories.consumed == 1000
    assert progress.calories.remaining == 1000
    assert progress.calories.percentage == 0.5
    assert progress.macros.protein.consumed == 75
    assert progress.macros.protein.percentage == 0.5


def test_zero_goals_do_not_divide_by_zero() -> None:
    goals = NutritionGoals(daily_calories=0, protein_g=0, carbs_g=0, fats_g=0)

    progress = build_daily_progress(
        "2024-01-01", [make_meal("2024-01-01")], goals
    )

    assert progress.calories.percentage == 0
    assert progress.macros.fats.percentage == 0
    assert progress.status == ProgressStatus.UNDER


def test_weekly_trends_are_chronological_and_skip_future_days() -> None:
    meals = [
        make_meal("2024-01-02", calories=2000),
        make_meal("2024-01-08", calories=2000),
        make_meal("2024-01-12", calories=5000),
    ]

    trends = build_weekly_trends(meals, GOALS, today=date(2024, 1, 10), weeks=2)

    assert [trend.week_start_date for trend in trends] == ["2023-12-31", "2024-01-07"]
    previous, current = trends
    assert previous.total_days == 7
    assert previous.days_met_goal == 1
    assert previous.goal_adherence == 14
    assert current.total_days == 4
    assert current.days_met_goal == 1
    assert current.average_calories == 500
    assert current.goal_adherence == 25


@pytest.mark.parametrize(
    ("hour", "bucket"),
    [
        (0, TimeOfDay.MORNING),
        (11, TimeOfDay.MORNING),
        (12, TimeOfDay.AFTERNOON),
        (16, TimeOfDay.AFTERNOON),
        (17, TimeOfDay.EVENING),
        (23, TimeOfDay.EVENING),
    ],
)
def test_classify_time_of_day(hour: int, bucket: TimeOfDay) -> None:
    assert classify_time_of_day(hour) == bucket


def test_remaining_targets_never_negative() -> None:
    meals = [make_meal("2024-01-01", calories=2500, protein_g=100)]
    today = build_daily_progress("2024-01-01", meals, GOALS)

    remaining = remaining_targets(today, GOALS, hour=18)

    assert remaining.calories == 0
    assert remaining.protein_g == 50
    assert remaining.time_of_day == TimeOfDay.EVENING
