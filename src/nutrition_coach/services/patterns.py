"""Eating pattern detection over a user's meal history."""

import logging
from dataclasses import dataclass, field

from nutrition_coach.domain.analysis import EatingPattern, Impact, PatternType
from nutrition_coach.domain.meals import LoggedMeal, NutritionGoals
from nutrition_coach.services.aggregation import (
    aggregate_by_meal_type,
    daily_calorie_totals,
    daily_meal_counts,
    macro_totals,
    mean,
    round_half_up,
    split_weekday_weekend,
)
from nutrition_coach.services.consistency import (
    coefficient_of_variation,
    consistency_score,
)
from nutrition_coach.services.timing import (
    MealTimingStrategy,
    PlaceholderTimingStrategy,
)

MIN_MEALS = 7
MIN_DAYS = 5
MIN_MEALS_PER_TYPE = 3
MIN_CONFIDENCE = 0.3
MIN_WEEKDAY_DAYS = 3
MIN_WEEKEND_DAYS = 2

_PROTEIN_KCAL_PER_G = 4
_CARBS_KCAL_PER_G = 4
_FATS_KCAL_PER_G = 9

_logger = logging.getLogger(__name__)

INSUFFICIENT_DATA = EatingPattern(
    type=PatternType.MEAL_FREQUENCY,
    description="Insufficient data for pattern analysis",
    frequency=0.0,
    impact=Impact.NEUTRAL,
    suggestion="Log meals consistently for better insights",
    confidence=0.1,
)


@dataclass(frozen=True)
class PatternAnalyzer:
    """Runs the pattern sub-analyses and keeps confident findings."""

    timing_strategy: MealTimingStrategy = field(
        default_factory=PlaceholderTimingStrategy
    )

    def analyze(
        self, meals: list[LoggedMeal], goals: NutritionGoals
    ) -> list[EatingPattern]:
        """Return confident eating patterns, or a placeholder for thin data."""
        if len(meals) < MIN_MEALS:
            _logger.debug(
                "Pattern analysis skipped: meals=%s required=%s",
                len(meals),
                MIN_MEALS,
            )
            return [INSUFFICIENT_DATA]

        patterns = [
            *self.analyze_timing(meals),
            *analyze_calorie_consistency(meals, goals),
            *analyze_macro_distribution(meals, goals),
            *analyze_meal_frequency(meals),
            *analyze_weekend_variance(meals),
        ]
        return [pattern for pattern in patterns if pattern.confidence > MIN_CONFIDENCE]

    def analyze_timing(self, meals: list[LoggedMeal]) -> list[EatingPattern]:
        """Flag regular and irregular meal times per meal type."""
        patterns = []
        for meal_type, type_meals in aggregate_by_meal_type(meals).items():
            if len(type_meals) < MIN_MEALS_PER_TYPE:
                continue
            timing = self.timing_strategy.analyze(meal_type, type_meals)
            if timing.consistency > 0.7:
                patterns.append(
                    EatingPattern(
                        type=PatternType.MEAL_TIMING,
                        description=f"Consistent {meal_type} timing",
                        frequency=timing.consistency,
                        impact=Impact.POSITIVE,
                        suggestion=(
                            f"Great job maintaining regular {meal_type} schedule!"
                        ),
                        confidence=timing.consistency,
                    )
                )
            elif timing.consistency < 0.4:
                patterns.append(
                    EatingPattern(
                        type=PatternType.MEAL_TIMING,
                        description=f"Irregular {meal_type} timing",
                        frequency=1 - timing.consistency,
                        impact=Impact.CONCERNING,
                        suggestion=(
                            f"Try eating {meal_type} at more consistent times "
                            "to support your metabolism"
                        ),
                        confidence=1 - timing.consistency,
                    )
                )
        return patterns


def analyze_eating_patterns(
    meals: list[LoggedMeal], goals: NutritionGoals
) -> list[EatingPattern]:
    """Analyze patterns with the default timing strategy."""
    return PatternAnalyzer().analyze(meals, goals)


def analyze_calorie_consistency(
    meals: list[LoggedMeal], goals: NutritionGoals
) -> list[EatingPattern]:
    """Score day-to-day calorie steadiness and accuracy against the goal."""
    daily = daily_calorie_totals(meals)
    if len(daily) < MIN_DAYS:
        return []

    patterns = []
    consistency = consistency_score(daily)
    if consistency > 0.8:
        patterns.append(
            EatingPattern(
                type=PatternType.CALORIE_CONSISTENCY,
                description="Very consistent daily calorie intake",
                frequency=consistency,
                impact=Impact.POSITIVE,
                suggestion=(
                    "Excellent calorie consistency! This supports steady "
                    "progress toward your goals."
                ),
                confidence=consistency,
            )
        )
    elif consistency < 0.5:
        variation = coefficient_of_variation(daily)
        patterns.append(
            EatingPattern(
                type=PatternType.CALORIE_CONSISTENCY,
                description=(
                    "High calorie variability "
                    f"({round_half_up(variation * 100)}% variation)"
                ),
                frequency=1 - consistency,
                impact=Impact.CONCERNING,
                suggestion=(
                    "Try meal planning to maintain more consistent daily "
                    "calories for better results."
                ),
                confidence=1 - consistency,
            )
        )

    target = goals.daily_calories
    if target <= 0:
        return patterns

    average = mean(daily)
    accuracy = 1 - abs(average - target) / target
    if accuracy > 0.9:
        patterns.append(
            EatingPattern(
                type=PatternType.CALORIE_CONSISTENCY,
                description="Excellent calorie goal accuracy",
                frequency=accuracy,
                impact=Impact.POSITIVE,
                suggestion=(
                    f"You're averaging {round_half_up(average)} calories against your "
                    f"{round_half_up(target)} calorie target - keep it up!"
                ),
                confidence=accuracy,
            )
        )
    elif accuracy < 0.7:
        deviation = "over" if average > target else "under"
        amount = abs(average - target)
        patterns.append(
            EatingPattern(
                type=PatternType.CALORIE_CONSISTENCY,
                description=(
                    f"Consistently {deviation} calorie target by "
                    f"~{round_half_up(amount)} calories"
                ),
                frequency=1 - accuracy,
                impact=Impact.CONCERNING,
                suggestion=(
                    "Consider adjusting portion sizes to get closer to your "
                    f"{round_half_up(target)} calorie target."
                ),
                confidence=1 - accuracy,
            )
        )
    return patterns


def analyze_macro_distribution(
    meals: list[LoggedMeal], goals: NutritionGoals
) -> list[EatingPattern]:
    """Compare the protein calorie share with the goal's share."""
    totals = macro_totals(meals)
    if totals.calories <= 0 or goals.daily_calories <= 0:
        return []

    actual = macro_calorie_shares(
        totals.calories, totals.protein_g, totals.carbs_g, totals.fats_g
    )
    target = macro_calorie_shares(
        goals.daily_calories, goals.protein_g, goals.carbs_g, goals.fats_g
    )
    actual_protein = actual["protein"]
    target_protein = target["protein"]
    deviation = abs(actual_protein - target_protein)

    if deviation < 0.05:
        return [
            EatingPattern(
                type=PatternType.MACRO_DISTRIBUTION,
                description="Excellent protein distribution",
                frequency=1 - deviation * 10,
                impact=Impact.POSITIVE,
                suggestion=(
                    "Your protein intake is well-balanced throughout your meals."
                ),
                confidence=0.8,
            )
        ]
    if actual_protein < target_protein - 0.05:
        return [
            EatingPattern(
                type=PatternType.MACRO_DISTRIBUTION,
                description="Low protein distribution",
                frequency=min(1.0, deviation * 10),
                impact=Impact.CONCERNING,
                suggestion=(
                    "Consider adding more protein-rich foods to your meals and snacks."
                ),
                confidence=0.8,
            )
        ]
    return []


def macro_calorie_shares(
    calories: float, protein_g: float, carbs_g: float, fats_g: float
) -> dict[str, float]:
    """Return each macro's share of calories using 4/4/9 kcal per gram."""
    if calories <= 0:
        return {"protein": 0.0, "carbs": 0.0, "fats": 0.0}
    return {
        "protein": protein_g * _PROTEIN_KCAL_PER_G / calories,
        "carbs": carbs_g * _CARBS_KCAL_PER_G / calories,
        "fats": fats_g * _FATS_KCAL_PER_G / calories,
    }


def analyze_meal_frequency(meals: list[LoggedMeal]) -> list[EatingPattern]:
    """Detect skipped meals, grazing and a steady meal count."""
    counts = daily_meal_counts(meals)
    if len(counts) < MIN_DAYS:
        return []

    patterns = []
    average = mean(counts)
    if average < 2.5:
        patterns.append(
            EatingPattern(
                type=PatternType.MEAL_FREQUENCY,
                description="Low meal frequency (skipping meals)",
                frequency=1 - average / 3,
                impact=Impact.CONCERNING,
                suggestion=(
                    "Try to eat regular meals to maintain steady energy and metabolism."
                ),
                confidence=0.7,
            )
        )
    elif average > 5:
        patterns.append(
            EatingPattern(
                type=PatternType.MEAL_FREQUENCY,
                description="High meal frequency (frequent eating)",
                frequency=min(1.0, (average - 3) / 3),
                impact=Impact.NEUTRAL,
                suggestion=(
                    "Frequent meals can work well if they help you meet your "
                    "goals consistently."
                ),
                confidence=0.6,
            )
        )

    consistency = consistency_score(counts)
    if consistency > 0.8:
        patterns.append(
            EatingPattern(
                type=PatternType.MEAL_FREQUENCY,
                description="Consistent meal frequency",
                frequency=consistency,
                impact=Impact.POSITIVE,
                suggestion="Great job maintaining a consistent eating schedule!",
                confidence=consistency,
            )
        )
    return patterns


def weekend_variance(meals: list[LoggedMeal]) -> float | None:
    """Relative gap between weekend and weekday average calories.

    Returns None when there are too few days on either side.
    """
    split = split_weekday_weekend(meals)
    if len(split.weekday) < MIN_WEEKDAY_DAYS or len(split.weekend) < MIN_WEEKEND_DAYS:
        return None
    weekday_average = mean(split.weekday)
    if weekday_average <= 0:
        return None
    return abs(mean(split.weekend) - weekday_average) / weekday_average


def analyze_weekend_variance(meals: list[LoggedMeal]) -> list[EatingPattern]:
    """Compare weekend eating with weekday eating."""
    variance = weekend_variance(meals)
    if variance is None:
        return []

    if variance > 0.2:
        split = split_weekday_weekend(meals)
        direction = "higher" if mean(split.weekend) > mean(split.weekday) else "lower"
        return [
            EatingPattern(
                type=PatternType.WEEKEND_VARIANCE,
                description=(
                    "Significant weekend variance "
                    f"({round_half_up(variance * 100)}% {direction})"
                ),
                frequency=min(1.0, variance),
                impact=Impact.CONCERNING if variance > 0.3 else Impact.NEUTRAL,
                suggestion=(
                    "Try to maintain more consistent eating patterns on weekends "
                    "for better overall progress."
                ),
                confidence=min(variance * 2, 0.9),
            )
        ]
    return [
        EatingPattern(
            type=PatternType.WEEKEND_VARIANCE,
            description="Consistent weekday/weekend eating",
            frequency=1 - variance,
            impact=Impact.POSITIVE,
            suggestion="Excellent consistency between weekdays and weekends!",
            confidence=1 - variance,
        )
    ]
