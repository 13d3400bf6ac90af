"""Nutrition quality scoring."""

from nutrition_coach.domain.analysis import (
    CoachingContext,
    NutritionQualityScore,
    PatternTrendSummary,
)
from nutrition_coach.domain.progress import DailyProgress
from nutrition_coach.services.aggregation import aggregate_by_meal_type, mean
from nutrition_coach.services.timing import (
    DEFAULT_TIMING_CONSISTENCY,
    MealTimingStrategy,
    PlaceholderTimingStrategy,
)

MACRO_WEIGHT = 0.3
CONSISTENCY_WEIGHT = 0.2
TIMING_WEIGHT = 0.2
ADHERENCE_WEIGHT = 0.3

STRENGTH_THRESHOLD = 0.8
IMPROVEMENT_THRESHOLD = 0.6


def detect_pattern_trends(
    context: CoachingContext,
    timing_strategy: MealTimingStrategy | None = None,
) -> PatternTrendSummary:
    """Summarize timing, weekend and adherence behavior.

    Protein and calorie distribution labels stay at their neutral values
    until meals carry timestamps.
    """
    strategy = timing_strategy or PlaceholderTimingStrategy()
    by_type = aggregate_by_meal_type(context.recent_meals)
    if by_type:
        timing_consistency = mean(
            [
                strategy.analyze(meal_type, meals).consistency
                for meal_type, meals in by_type.items()
            ]
        )
    else:
        timing_consistency = DEFAULT_TIMING_CONSISTENCY

    if context.adherence_score > 0.8:
        adherence_trend = "improving"
    elif context.adherence_score < 0.6:
        adherence_trend = "declining"
    else:
        adherence_trend = "stable"

    return PatternTrendSummary(
        meal_timing_consistency=timing_consistency,
        weekend_variance=context.weekend_variance,
        protein_distribution="optimal",
        calorie_distribution="even",
        adherence_trend=adherence_trend,
    )


def macro_balance_score(today: DailyProgress) -> float:
    """Average closeness of each macro ratio to 1.0, clamped to [0, 1]."""
    macros = today.macros
    ratios = (
        macros.protein.percentage,
        macros.carbs.percentage,
        macros.fats.percentage,
    )
    score = sum(1 - abs(ratio - 1.0) for ratio in ratios) / len(ratios)
    return max(0.0, min(1.0, score))


def quality_score(
    context: CoachingContext,
    timing_strategy: MealTimingStrategy | None = None,
) -> NutritionQualityScore:
    """Combine macro balance, consistency, timing and adherence."""
    summary = detect_pattern_trends(context, timing_strategy)
    macro_balance = macro_balance_score(context.today)
    consistency = summary.meal_timing_consistency
    timing = 1 - min(summary.weekend_variance, 0.5) * 2
    adherence = context.adherence_score

    overall = (
        macro_balance * MACRO_WEIGHT
        + consistency * CONSISTENCY_WEIGHT
        + timing * TIMING_WEIGHT
        + adherence * ADHERENCE_WEIGHT
    )

    strengths: list[str] = []
    improvements: list[str] = []
    for value, strength, improvement in (
        (adherence, "Excellent goal adherence", "Improve goal consistency"),
        (macro_balance, "Well-balanced macronutrients", "Better macro distribution"),
        (consistency, "Consistent meal timing", "More regular meal schedule"),
        (timing, "Consistent eating patterns", "Reduce weekend variance"),
    ):
        if value > STRENGTH_THRESHOLD:
            strengths.append(strength)
        elif value < IMPROVEMENT_THRESHOLD:
            improvements.append(improvement)

    return NutritionQualityScore(
        overall=overall,
        macro_balance=macro_balance,
        consistency=consistency,
        timing=timing,
        adherence=adherence,
        strengths=strengths,
        improvements=improvements,
    )
