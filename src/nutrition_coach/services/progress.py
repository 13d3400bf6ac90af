"""Daily progress and weekly trend calculation from logged meals."""

from datetime import date, timedelta

from nutrition_coach.domain.meals import LoggedMeal, NutritionGoals
from nutrition_coach.domain.progress import (
    CalorieProgress,
    DailyProgress,
    MacroBreakdown,
    MacroProgress,
    ProgressStatus,
    RemainingTargets,
    TimeOfDay,
    WeeklyTrend,
)
from nutrition_coach.services.aggregation import macro_totals, round_half_up

DAYS_PER_WEEK = 7
NOON = 12
LATE_AFTERNOON = 17


def build_daily_progress(
    day: str, meals: list[LoggedMeal], goals: NutritionGoals
) -> DailyProgress:
    """Sum a day's meals into a progress snapshot against the goals."""
    totals = macro_totals([meal for meal in meals if meal.date == day])
    calorie_ratio = _ratio(totals.calories, goals.daily_calories)

    if 0.95 <= calorie_ratio <= 1.05:
        status = ProgressStatus.MET
    elif calorie_ratio > 1.05:
        status = ProgressStatus.OVER
    else:
        status = ProgressStatus.UNDER

    return DailyProgress(
        date=day,
        calories=CalorieProgress(
            consumed=totals.calories,
            goal=goals.daily_calories,
            remaining=max(0.0, goals.daily_calories - totals.calories),
            percentage=calorie_ratio,
        ),
        macros=MacroBreakdown(
            protein=_macro(totals.protein_g, goals.protein_g),
            carbs=_macro(totals.carbs_g, goals.carbs_g),
            fats=_macro(totals.fats_g, goals.fats_g),
        ),
        status=status,
    )


def build_weekly_trends(
    meals: list[LoggedMeal],
    goals: NutritionGoals,
    today: date,
    weeks: int = 4,
) -> list[WeeklyTrend]:
    """Return Sunday-started weekly aggregates, oldest week first.

    Days after ``today`` are not counted.
    """
    days_since_sunday = (today.weekday() + 1) % DAYS_PER_WEEK
    current_week_start = today - timedelta(days=days_since_sunday)
    trends = []
    for offset in range(weeks - 1, -1, -1):
        week_start = current_week_start - timedelta(weeks=offset)
        week_days = [
            build_daily_progress(day.isoformat(), meals, goals)
            for day in (
                week_start + timedelta(days=index) for index in range(DAYS_PER_WEEK)
            )
            if day <= today
        ]
        if not week_days:
            continue
        days_met = sum(1 for day in week_days if day.status == ProgressStatus.MET)
        average_calories = sum(day.calories.consumed for day in week_days) / len(
            week_days
        )
        trends.append(
            WeeklyTrend(
                week_start_date=week_start.isoformat(),
                average_calories=round_half_up(average_calories),
                goal_adherence=round_half_up(days_met / len(week_days) * 100),
                total_days=len(week_days),
                days_met_goal=days_met,
            )
        )
    return trends


def classify_time_of_day(hour: int) -> TimeOfDay:
    """Bucket an hour of the day."""
    if hour < NOON:
        return TimeOfDay.MORNING
    if hour < LATE_AFTERNOON:
        return TimeOfDay.AFTERNOON
    return TimeOfDay.EVENING


def remaining_targets(
    today: DailyProgress, goals: NutritionGoals, hour: int
) -> RemainingTargets:
    """Return what is left of today's goals."""
    return RemainingTargets(
        calories=max(0.0, goals.daily_calories - today.calories.consumed),
        protein_g=max(0.0, goals.protein_g - today.macros.protein.consumed),
        carbs_g=max(0.0, goals.carbs_g - today.macros.carbs.consumed),
        fats_g=max(0.0, goals.fats_g - today.macros.fats.consumed),
        time_of_day=classify_time_of_day(hour),
    )


def _ratio(consumed: float, goal: float) -> float:
    if goal <= 0:
        return 0.0
    return consumed / goal


def _macro(consumed: float, goal: float) -> MacroProgress:
    return MacroProgress(
        consumed=consumed,
        goal=goal,
        percentage=_ratio(consumed, goal),
    )
