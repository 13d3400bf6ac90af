"""Meal timing strategies."""

from dataclasses import dataclass
from typing import Protocol

from nutrition_coach.domain.analysis import MealTimingAnalysis
from nutrition_coach.domain.meals import LoggedMeal, MealType

OPTIMAL_WINDOWS: dict[MealType, tuple[int, int]] = {
    MealType.BREAKFAST: (6, 10),
    MealType.LUNCH: (11, 14),
    MealType.DINNER: (17, 20),
    MealType.SNACK: (14, 16),
}
_FALLBACK_WINDOW = (12, 13)
DEFAULT_TIMING_CONSISTENCY = 0.7


class MealTimingStrategy(Protocol):
    """Computes how regularly a meal type is eaten."""

    def analyze(
        self, meal_type: MealType, meals: list[LoggedMeal]
    ) -> MealTimingAnalysis:
        """Return the timing profile for meals of one type."""


@dataclass(frozen=True)
class PlaceholderTimingStrategy(MealTimingStrategy):
    """Placeholder strategy returning fixed values inside the optimal window.

    Logged meals carry no reliable timestamps yet, so this reports a constant
    consistency. Swap in a timestamp-based strategy once `logged_at` is
    populated by the logging flow.
    """

    consistency: float = DEFAULT_TIMING_CONSISTENCY
    deviation: float = 0.5

    def analyze(
        self, meal_type: MealType, meals: list[LoggedMeal]
    ) -> MealTimingAnalysis:
        start, end = OPTIMAL_WINDOWS.get(meal_type, _FALLBACK_WINDOW)
        return MealTimingAnalysis(
            meal_type=meal_type,
            average_hour=start + 1,
            consistency=self.consistency,
            window_start=start,
            window_end=end,
            deviation=self.deviation,
        )
