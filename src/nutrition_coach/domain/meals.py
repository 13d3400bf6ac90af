"""Domain models for logged meals and nutrition goals."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class MealType(StrEnum):
    """Meal slot a logged entry belongs to."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


@dataclass(frozen=True)
class LoggedMeal:
    """A single logged meal with its macros."""

    date: str
    meal_type: MealType
    calories: float
    protein_g: float
    carbs_g: float
    fats_g: float
    logged_at: datetime | None = None


@dataclass(frozen=True)
class NutritionGoals:
    """Daily nutrition targets."""

    daily_calories: float
    protein_g: float
    carbs_g: float
    fats_g: float


DEFAULT_GOALS = NutritionGoals(
    daily_calories=2000,
    protein_g=125,
    carbs_g=250,
    fats_g=56,
)
