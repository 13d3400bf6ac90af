"""Longer-horizon recommendations built from patterns and trends."""

from dataclasses import replace

from nutrition_coach.domain.analysis import (
    AnalysisRecommendation,
    CoachingContext,
    EatingPattern,
    Impact,
    PatternType,
    PersonalizedRecommendations,
    Priority,
    ProgressTrend,
    RecommendationType,
    TrendDirection,
)
from nutrition_coach.domain.progress import TimeOfDay
from nutrition_coach.services.aggregation import round_half_up
from nutrition_coach.services.quality import detect_pattern_trends

PATTERN_TEMPLATES: dict[PatternType, AnalysisRecommendation] = {
    PatternType.CALORIE_CONSISTENCY: AnalysisRecommendation(
        type=RecommendationType.WEEKLY,
        priority=Priority.HIGH,
        title="Improve Calorie Consistency",
        description=(
            "Your daily calorie intake varies significantly, which can impact "
            "your progress."
        ),
        action_steps=[
            "Plan your meals in advance",
            "Use a food scale for accurate portions",
            "Prepare consistent meal templates",
            "Track your intake throughout the day",
        ],
        expected_impact="More predictable progress and better hunger management",
        timeframe="2-3 weeks",
    ),
    PatternType.MEAL_TIMING: AnalysisRecommendation(
        type=RecommendationType.DAILY,
        priority=Priority.MEDIUM,
        title="Establish Regular Meal Times",
        description=(
            "Irregular meal timing can affect your metabolism and energy levels."
        ),
        action_steps=[
            "Set consistent meal times",
            "Use phone reminders for meals",
            "Prepare meals in advance",
            "Listen to your hunger cues",
        ],
        expected_impact="Better energy levels and improved metabolism",
        timeframe="1-2 weeks",
    ),
    PatternType.MEAL_FREQUENCY: AnalysisRecommendation(
        type=RecommendationType.DAILY,
        priority=Priority.MEDIUM,
        title="Stop Skipping Meals",
        description=(
            "Skipping meals makes it harder to hit your targets and keep energy steady."
        ),
        action_steps=[
            "Eat at least three meals a day",
            "Keep a quick breakfast option ready",
            "Pack a lunch on busy days",
            "Log each meal right after eating",
        ],
        expected_impact="Steadier energy and fewer late-day cravings",
        timeframe="1-2 weeks",
    ),
    PatternType.WEEKEND_VARIANCE: AnalysisRecommendation(
        type=RecommendationType.WEEKLY,
        priority=Priority.MEDIUM,
        title="Plan Your Weekends",
        description=(
            "Your weekend intake differs a lot from your weekdays, which slows "
            "weekly progress."
        ),
        action_steps=[
            "Plan your weekend meals in advance",
            "Decide on one flexible meal per weekend",
            "Keep logging on Saturdays and Sundays",
            "Shop for weekend groceries on Friday",
        ],
        expected_impact="More consistent weekly averages",
        timeframe="2-4 weeks",
    ),
}

ADHERENCE_RECOVERY = AnalysisRecommendation(
    type=RecommendationType.IMMEDIATE,
    priority=Priority.HIGH,
    title="Refocus on Goal Adherence",
    description="Your goal adherence has declined recently. Let's get back on track.",
    action_steps=[
        "Review your current goals and adjust if needed",
        "Identify specific challenges you're facing",
        "Simplify your approach temporarily",
        "Focus on one habit at a time",
    ],
    expected_impact="Renewed motivation and clearer path forward",
    timeframe="This week",
)

PROTEIN_INCREASE = AnalysisRecommendation(
    type=RecommendationType.IMMEDIATE,
    priority=Priority.HIGH,
    title="Increase Protein Intake",
    description=(
        "You're consistently under your protein target, which is important for "
        "your goals."
    ),
    action_steps=[
        "Add protein to each meal and snack",
        "Keep protein-rich snacks available",
        "Consider a protein supplement if needed",
        "Plan protein sources in advance",
    ],
    expected_impact="Better satiety, muscle preservation, and goal achievement",
    timeframe="Today and ongoing",
)


def generate_recommendations(
    patterns: list[EatingPattern],
    trends: list[ProgressTrend],
    context: CoachingContext,
) -> list[AnalysisRecommendation]:
    """Map concerning patterns and declining trends to action plans.

    Plans are deduplicated by title, so there is not one plan per pattern:
    two concerning calorie findings (high variability and an off-target
    average) share a single "Improve Calorie Consistency" plan.
    """
    templates = [
        PATTERN_TEMPLATES[pattern.type]
        for pattern in patterns
        if pattern.impact == Impact.CONCERNING and pattern.type in PATTERN_TEMPLATES
    ]
    templates.extend(
        ADHERENCE_RECOVERY
        for trend in trends
        if trend.direction == TrendDirection.DECLINING
        and trend.significance != Priority.LOW
        and trend.metric == "adherence"
    )
    if context.remaining.protein_g > context.goals.protein_g * 0.5:
        templates.append(PROTEIN_INCREASE)

    recommendations: list[AnalysisRecommendation] = []
    for template in templates:
        if any(item.title == template.title for item in recommendations):
            continue
        recommendations.append(
            replace(template, action_steps=list(template.action_steps))
        )
    return sorted(
        recommendations, key=lambda item: item.priority.weight, reverse=True
    )


def personalized_recommendations(
    context: CoachingContext,
) -> PersonalizedRecommendations:
    """Group short recommendations by horizon."""
    remaining = context.remaining
    summary = detect_pattern_trends(context)
    result = PersonalizedRecommendations()

    if remaining.protein_g > 20:
        result.immediate.append(
            f"Add {round_half_up(remaining.protein_g)}g protein to your next meal"
        )
    if remaining.calories > 500 and remaining.time_of_day == TimeOfDay.EVENING:
        result.immediate.append("Plan a substantial dinner to meet your calorie goals")

    if summary.protein_distribution == "back-loaded":
        result.daily.append("Try to include more protein in your breakfast and lunch")
    if summary.calorie_distribution == "back-loaded":
        result.daily.append("Spread your calories more evenly throughout the day")

    if summary.weekend_variance > 0.3:
        result.weekly.append(
            "Plan your weekend meals in advance to maintain consistency"
        )
    if summary.meal_timing_consistency < 0.6:
        result.weekly.append(
            "Establish more regular meal times to support your metabolism"
        )

    if summary.adherence_trend == "declining":
        result.long_term.append(
            "Consider simplifying your approach and focusing on one habit at a time"
        )
    if context.adherence_score > 0.8:
        result.long_term.append(
            "You're ready to add more advanced nutrition strategies"
        )
    return result
