"""Coaching insight generation and ranking."""

from nutrition_coach.domain.analysis import (
    CoachingContext,
    CoachingInsight,
    Impact,
    InsightType,
    Priority,
)
from nutrition_coach.domain.progress import ProgressStatus, TimeOfDay
from nutrition_coach.services.aggregation import round_half_up

MAX_INSIGHTS = 8
HOURS_PER_DAY = 24


def generate_insights(context: CoachingContext) -> list[CoachingInsight]:
    """Collect insights from every source and return the top ranked ones."""
    insights = [
        *daily_progress_insights(context),
        *weekly_pattern_insights(context),
        *macro_balance_insights(context),
        *behavioral_pattern_insights(context),
        *predictive_insights(context),
        *status_insights(context),
    ]
    return rank_insights(insights)


def rank_insights(insights: list[CoachingInsight]) -> list[CoachingInsight]:
    """Order by priority then confidence, keeping the top entries."""
    ranked = sorted(
        insights,
        key=lambda insight: (insight.priority.weight, insight.confidence),
        reverse=True,
    )
    return ranked[:MAX_INSIGHTS]


def daily_progress_insights(context: CoachingContext) -> list[CoachingInsight]:
    """Precision, protein timing and calorie pacing for today."""
    insights = []
    remaining = context.remaining
    evening = remaining.time_of_day == TimeOfDay.EVENING

    if abs(context.today.calories.percentage - 1.0) < 0.05:
        insights.append(
            CoachingInsight(
                type=InsightType.CELEBRATION,
                priority=Priority.HIGH,
                message=(
                    "Incredible precision! You're within 5% of your calorie target "
                    "- this level of accuracy drives excellent results."
                ),
                actionable=False,
                timeframe="immediate",
                related_goal="daily_calories",
            )
        )

    if remaining.protein_g > 20 and evening:
        insights.append(
            CoachingInsight(
                type=InsightType.SUGGESTION,
                priority=Priority.HIGH,
                message=(
                    f"You need {round_half_up(remaining.protein_g)}g more protein "
                    "today. Evening protein intake is crucial for overnight muscle "
                    "recovery."
                ),
                actionable=True,
                timeframe="today",
                related_goal="protein",
            )
        )
    elif remaining.protein_g < 5 and not evening:
        insights.append(
            CoachingInsight(
                type=InsightType.ENCOURAGEMENT,
                priority=Priority.MEDIUM,
                message=(
                    "Excellent protein pacing! You're ahead of schedule, which "
                    "helps with satiety throughout the day."
                ),
                actionable=False,
                timeframe="today",
                related_goal="protein",
            )
        )

    if context.goals.daily_calories > 0:
        remaining_ratio = remaining.calories / context.goals.daily_calories
        if remaining_ratio > 0.4 and evening:
            insights.append(
                CoachingInsight(
                    type=InsightType.SUGGESTION,
                    priority=Priority.MEDIUM,
                    message=(
                        "You have a large portion of calories remaining. Consider "
                        "spreading meals more evenly for better energy levels."
                    ),
                    actionable=True,
                    timeframe="today",
                    related_goal="daily_calories",
                )
            )
    return insights


def weekly_pattern_insights(context: CoachingContext) -> list[CoachingInsight]:
    """Band the adherence score and flag weekend swings."""
    insights = []
    score = context.adherence_score
    percent = round_half_up(score * 100)

    if score > 0.9:
        insights.append(
            CoachingInsight(
                type=InsightType.CELEBRATION,
                priority=Priority.HIGH,
                message=(
                    f"Outstanding! You've maintained {percent}% adherence. "
                    "You're building sustainable habits!"
                ),
                actionable=False,
                timeframe="week",
            )
        )
    elif score > 0.8:
        insights.append(
            CoachingInsight(
                type=InsightType.ENCOURAGEMENT,
                priority=Priority.MEDIUM,
                message=(
                    f"Great consistency at {percent}% adherence. "
                    "You're on the right track!"
                ),
                actionable=False,
                timeframe="week",
            )
        )
    elif score < 0.6:
        insights.append(
            CoachingInsight(
                type=InsightType.ENCOURAGEMENT,
                priority=Priority.HIGH,
                message=(
                    f"Your adherence is {percent}%. Remember, progress isn't about "
                    "perfection - every healthy choice counts!"
                ),
                actionable=True,
                timeframe="week",
            )
        )

    if context.weekend_variance > 0.3:
        insights.append(
            CoachingInsight(
                type=InsightType.EDUCATION,
                priority=Priority.MEDIUM,
                message=(
                    "Your nutrition varies significantly on weekends. Planning "
                    "weekend meals can help maintain consistency."
                ),
                actionable=True,
                timeframe="week",
            )
        )
    return insights


def macro_balance_insights(context: CoachingContext) -> list[CoachingInsight]:
    """Check today's macro ratios against their goals."""
    insights = []
    macros = context.today.macros
    protein = macros.protein.percentage
    carbs = macros.carbs.percentage

    if all(0.8 <= ratio <= 1.2 for ratio in (protein, carbs, macros.fats.percentage)):
        insights.append(
            CoachingInsight(
                type=InsightType.ENCOURAGEMENT,
                priority=Priority.MEDIUM,
                message=(
                    "Your macronutrient distribution is well-balanced today, "
                    "supporting both energy and satiety."
                ),
                actionable=False,
                timeframe="today",
            )
        )
    if protein < 0.7:
        insights.append(
            CoachingInsight(
                type=InsightType.SUGGESTION,
                priority=Priority.HIGH,
                message=(
                    "Your protein intake is low today. Protein helps with satiety "
                    "and muscle maintenance."
                ),
                actionable=True,
                timeframe="today",
                related_goal="protein",
            )
        )
    if carbs > 1.3:
        insights.append(
            CoachingInsight(
                type=InsightType.EDUCATION,
                priority=Priority.MEDIUM,
                message=(
                    "You're over your carb target today. Consider balancing with "
                    "more protein and healthy fats."
                ),
                actionable=True,
                timeframe="today",
                related_goal="carbs",
            )
        )
    return insights


def behavioral_pattern_insights(context: CoachingContext) -> list[CoachingInsight]:
    """Surface the first concerning and the first positive pattern."""
    insights = []
    concerning = next(
        (p for p in context.patterns if p.impact == Impact.CONCERNING), None
    )
    if concerning is not None:
        insights.append(
            CoachingInsight(
                type=InsightType.EDUCATION,
                priority=Priority.MEDIUM,
                message=concerning.suggestion
                or (
                    "I've noticed some patterns in your eating that we could "
                    "optimize for better results."
                ),
                actionable=True,
                timeframe="ongoing",
                confidence=concerning.confidence,
            )
        )

    positive = next((p for p in context.patterns if p.impact == Impact.POSITIVE), None)
    if positive is not None:
        insights.append(
            CoachingInsight(
                type=InsightType.ENCOURAGEMENT,
                priority=Priority.LOW,
                message=(
                    f"Great job with your {positive.description.lower()}! "
                    "Keep up these healthy habits."
                ),
                actionable=False,
                timeframe="ongoing",
                confidence=positive.confidence,
            )
        )
    return insights


def predictive_insights(context: CoachingContext) -> list[CoachingInsight]:
    """Project today's pace and this week's adherence forward."""
    insights = []
    hour = context.current_hour
    progress = context.today.calories.percentage
    expected = hour / HOURS_PER_DAY

    if progress > expected * 1.2:
        insights.append(
            CoachingInsight(
                type=InsightType.ENCOURAGEMENT,
                priority=Priority.MEDIUM,
                message=(
                    "You're ahead of pace today! This puts you in a great position "
                    "to meet your goals."
                ),
                actionable=False,
                timeframe="today",
            )
        )
    elif progress < expected * 0.6 and hour > 12:
        insights.append(
            CoachingInsight(
                type=InsightType.SUGGESTION,
                priority=Priority.HIGH,
                message=(
                    "You're behind pace for today. Consider having a substantial "
                    "meal to get back on track."
                ),
                actionable=True,
                timeframe="immediate",
            )
        )

    if context.adherence_score > 0.8:
        insights.append(
            CoachingInsight(
                type=InsightType.CELEBRATION,
                priority=Priority.MEDIUM,
                message=(
                    "Based on your current trajectory, you're on track for an "
                    "excellent week! Keep up the momentum."
                ),
                actionable=False,
                timeframe="week",
            )
        )
    elif context.adherence_score < 0.5:
        insights.append(
            CoachingInsight(
                type=InsightType.ENCOURAGEMENT,
                priority=Priority.HIGH,
                message=(
                    "Your recent pattern suggests you might miss weekly goals. "
                    "Let's focus on getting back on track today."
                ),
                actionable=True,
                timeframe="week",
            )
        )
    return insights


def status_insights(context: CoachingContext) -> list[CoachingInsight]:
    """Status and time-of-day insights kept for existing chat flows."""
    insights = []
    remaining = context.remaining

    if context.today.status == ProgressStatus.MET:
        insights.append(
            CoachingInsight(
                type=InsightType.CELEBRATION,
                priority=Priority.HIGH,
                message=(
                    "Fantastic! You're hitting your nutrition goals perfectly today. "
                    "This consistency is what leads to lasting results!"
                ),
                actionable=False,
                timeframe="immediate",
            )
        )
    elif context.today.status == ProgressStatus.OVER:
        insights.append(
            CoachingInsight(
                type=InsightType.SUGGESTION,
                priority=Priority.MEDIUM,
                message=(
                    "You've exceeded your calorie goal today. Consider lighter "
                    "options for remaining meals and focus on hydration."
                ),
                actionable=True,
                timeframe="today",
                related_goal="daily_calories",
            )
        )
    elif remaining.calories > 500:
        insights.append(
            CoachingInsight(
                type=InsightType.SUGGESTION,
                priority=Priority.MEDIUM,
                message=(
                    f"You have {round_half_up(remaining.calories)} calories "
                    "remaining. This is a good opportunity for a balanced meal or "
                    "nutritious snack."
                ),
                actionable=True,
                timeframe="today",
                related_goal="daily_calories",
            )
        )

    if remaining.time_of_day == TimeOfDay.EVENING and remaining.calories > 300:
        insights.append(
            CoachingInsight(
                type=InsightType.SUGGESTION,
                priority=Priority.MEDIUM,
                message=(
                    "It's evening and you still have calories to work with. Consider "
                    "a balanced dinner that includes protein and vegetables."
                ),
                actionable=True,
                timeframe="immediate",
            )
        )
    return insights
