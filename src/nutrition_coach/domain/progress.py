"""Domain models for daily progress and weekly trends."""

from dataclasses import dataclass
from enum import StrEnum


class ProgressStatus(StrEnum):
    """Calorie status of a day relative to its goal."""

    MET = "met"
    UNDER = "under"
    OVER = "over"


class TimeOfDay(StrEnum):
    """Coarse time-of-day bucket."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"


@dataclass(frozen=True)
class CalorieProgress:
    """Calories consumed against the daily goal."""

    consumed: float
    goal: float
    remaining: float
    percentage: float


@dataclass(frozen=True)
class MacroProgress:
    """A single macro consumed against its goal."""

    consumed: float
    goal: float
    percentage: float


@dataclass(frozen=True)
class MacroBreakdown:
    """Progress for protein, carbs and fats."""

    protein: MacroProgress
    carbs: MacroProgress
    fats: MacroProgress


@dataclass(frozen=True)
class DailyProgress:
    """Progress snapshot for one calendar day."""

    date: str
    calories: CalorieProgress
    macros: MacroBreakdown
    status: ProgressStatus


@dataclass(frozen=True)
class WeeklyTrend:
    """Aggregates for one calendar week."""

    week_start_date: str
    average_calories: float
    goal_adherence: float
    total_days: int
    days_met_goal: int


@dataclass(frozen=True)
class RemainingTargets:
    """What is left of today's goals."""

    calories: float
    protein_g: float
    carbs_g: float
    fats_g: float
    time_of_day: TimeOfDay
