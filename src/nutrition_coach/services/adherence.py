"""Goal adherence scoring."""

from nutrition_coach.domain.meals import NutritionGoals
from nutrition_coach.domain.progress import DailyProgress


def is_adherent_day(day: DailyProgress) -> bool:
    """A day counts only when every criterion holds."""
    calorie_ratio = day.calories.percentage
    calories_in_range = 0.8 <= calorie_ratio <= 1.2
    protein_met = day.macros.protein.percentage >= 0.8
    balanced = abs(calorie_ratio - 1) < 0.2
    return calories_in_range and protein_met and balanced


def adherence_score(days: list[DailyProgress], goals: NutritionGoals) -> float:
    """Fraction of days meeting the adherence rule, 0 for no days.

    ``goals`` is accepted for symmetry with the other scorers; the daily
    snapshots already carry their ratios against the goals.
    """
    if not days:
        return 0.0
    adherent = sum(1 for day in days if is_adherent_day(day))
    return adherent / len(days)
