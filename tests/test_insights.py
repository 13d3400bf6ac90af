"""Tests for coaching insight generation."""

from nutrition_coach.domain.analysis import (
    CoachingInsight,
    EatingPattern,
    Impact,
    InsightType,
    PatternType,
    Priority,
)
from nutrition_coach.services.insights import (
    MAX_INSIGHTS,
    behavioral_pattern_insights,
    daily_progress_insights,
    generate_insights,
    macro_balance_insights,
    predictive_insights,
    rank_insights,
    status_insights,
    weekly_pattern_insights,
)
from tests.conftest import make_context, make_day

CONCERNING = EatingPattern(
    type=PatternType.MEAL_FREQUENCY,
    description="Low meal frequency (skipping meals)",
    frequency=0.6,
    impact=Impact.CONCERNING,
    suggestion="Try to eat regular meals to maintain steady energy and metabolism.",
    confidence=0.7,
)
POSITIVE = EatingPattern(
    type=PatternType.CALORIE_CONSISTENCY,
    description="Very consistent daily calorie intake",
    frequency=1.0,
    impact=Impact.POSITIVE,
    suggestion="Excellent calorie consistency!",
    confidence=1.0,
)


def _messages(insights: list[CoachingInsight]) -> str:
    return " | ".join(insight.message for insight in insights)


def test_output_is_capped_and_sorted_by_priority() -> None:
    context = make_context(
        today=make_day(calorie_ratio=0.3, protein_ratio=0.3, carbs_ratio=1.5),
        hour=19,
        adherence=0.3,
        patterns=[CONCERNING, POSITIVE],
        weekend_variance=0.5,
    )

    insights = generate_insights(context)

    assert len(insights) == MAX_INSIGHTS
    weights = [insight.priority.weight for insight in insights]
    assert weights == sorted(weights, reverse=True)


def test_ranking_breaks_ties_by_confidence() -> None:
    low = CoachingInsight(
        type=InsightType.EDUCATION,
        priority=Priority.MEDIUM,
        message="default confidence",
        actionable=True,
        timeframe="ongoing",
    )
    high = CoachingInsight(
        type=InsightType.EDUCATION,
        priority=Priority.MEDIUM,
        message="confident",
        actionable=True,
        timeframe="ongoing",
        confidence=0.9,
    )
    urgent = CoachingInsight(
        type=InsightType.SUGGESTION,
        priority=Priority.HIGH,
        message="urgent",
        actionable=True,
        timeframe="today",
        confidence=0.1,
    )

    ranked = rank_insights([low, high, urgent])

    assert [insight.message for insight in ranked] == [
        "urgent",
        "confident",
        "default confidence",
    ]
    assert low.confidence == 0.5


def test_precision_celebration_near_target() -> None:
    insights = daily_progress_insights(make_context(today=make_day(calorie_ratio=1.02)))

    assert "Incredible precision" in _messages(insights)


def test_evening_protein_deficit_suggestion() -> None:
    context = make_context(today=make_day(protein_ratio=0.5), hour=19)

    insights = daily_progress_insights(context)

    protein = next(i for i in insights if i.related_goal == "protein")
    assert protein.priority == Priority.HIGH
    assert protein.message.startswith("You need 75g more protein today.")


def test_large_evening_calorie_gap_suggests_spreading_meals() -> None:
    context = make_context(today=make_day(calorie_ratio=0.5), hour=20)

    insights = daily_progress_insights(context)

    assert "spreading meals more evenly" in _messages(insights)


def test_adherence_banding() -> None:
    excellent = weekly_pattern_insights(make_context(adherence=0.95))
    good = weekly_pattern_insights(make_context(adherence=0.85))
    struggling = weekly_pattern_insights(make_context(adherence=0.5))
    middling = weekly_pattern_insights(make_context(adherence=0.7))

    assert excellent[0].type == InsightType.CELEBRATION
    assert "95% adherence" in excellent[0].message
    assert good[0].type == InsightType.ENCOURAGEMENT
    assert good[0].priority == Priority.MEDIUM
    assert struggling[0].priority == Priority.HIGH
    assert struggling[0].actionable
    assert middling == []


def test_weekend_variance_education() -> None:
    insights = weekly_pattern_insights(make_context(weekend_variance=0.4))

    assert insights[-1].type == InsightType.EDUCATION
    assert "weekends" in insights[-1].message


def test_macro_balance_insights() -> None:
    balanced = macro_balance_insights(make_context())
    low_protein = macro_balance_insights(make_context(today=make_day(protein_ratio=0.5)))
    high_carbs = macro_balance_insights(make_context(today=make_day(carbs_ratio=1.4)))

    assert "well-balanced" in _messages(balanced)
    assert low_protein[0].priority == Priority.HIGH
    assert low_protein[0].related_goal == "protein"
    assert high_carbs[0].type == InsightType.EDUCATION
    assert high_carbs[0].related_goal == "carbs"


def test_behavioral_insights_surface_first_patterns() -> None:
    insights = behavioral_pattern_insights(
        make_context(patterns=[POSITIVE, CONCERNING])
    )

    assert insights[0].message == CONCERNING.suggestion
    assert insights[0].type == InsightType.EDUCATION
    assert insights[1].message.startswith(
        "Great job with your very consistent daily calorie intake!"
    )
    assert insights[1].priority == Priority.LOW


def test_predictive_pace() -> None:
    ahead = predictive_insights(make_context(today=make_day(calorie_ratio=0.8), hour=12))
    behind = predictive_insights(make_context(today=make_day(calorie_ratio=0.2), hour=18))

    assert "ahead of pace" in _messages(ahead)
    assert "behind pace" in _messages(behind)


def test_predictive_weekly_projection() -> None:
    on_track = predictive_insights(make_context(adherence=0.9))
    at_risk = predictive_insights(make_context(adherence=0.3))

    assert "on track for an excellent week" in _messages(on_track)
    assert "might miss weekly goals" in _messages(at_risk)


def test_status_insights() -> None:
    met = status_insights(make_context())
    over = status_insights(make_context(today=make_day(calorie_ratio=1.3)))
    under = status_insights(make_context(today=make_day(calorie_ratio=0.5), hour=19))

    assert met[0].type == InsightType.CELEBRATION
    assert "exceeded your calorie goal" in over[0].message
    assert under[0].message.startswith("You have 1000 calories remaining.")
    assert "It's evening" in under[1].message
