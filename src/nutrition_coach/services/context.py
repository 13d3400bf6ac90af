"""Coaching context assembly and summary text."""

from nutrition_coach.domain.analysis import CoachingContext
from nutrition_coach.domain.meals import DEFAULT_GOALS, LoggedMeal, NutritionGoals
from nutrition_coach.domain.progress import DailyProgress, WeeklyTrend
from nutrition_coach.services.adherence import adherence_score
from nutrition_coach.services.aggregation import round_half_up
from nutrition_coach.services.patterns import PatternAnalyzer, weekend_variance
from nutrition_coach.services.progress import remaining_targets
from nutrition_coach.services.trends import detect_trends


def build_coaching_context(  # noqa: PLR0913
    today: DailyProgress,
    weekly_trends: list[WeeklyTrend],
    recent_meals: list[LoggedMeal],
    goals: NutritionGoals | None = None,
    current_hour: int = 12,
    goal_type: str = "maintain",
    daily_progress: list[DailyProgress] | None = None,
    pattern_analyzer: PatternAnalyzer | None = None,
) -> CoachingContext:
    """Build the coaching context for one user at one point in time.

    Pass the analyzer the analysis service runs with so the context and the
    analysis see the same patterns.
    """
    resolved_goals = goals or DEFAULT_GOALS
    analyzer = pattern_analyzer or PatternAnalyzer()
    history = daily_progress if daily_progress else [today]
    patterns = analyzer.analyze(recent_meals, resolved_goals) if recent_meals else []
    return CoachingContext(
        goals=resolved_goals,
        today=today,
        remaining=remaining_targets(today, resolved_goals, current_hour),
        adherence_score=adherence_score(history, resolved_goals),
        current_hour=current_hour,
        trends=detect_trends(weekly_trends),
        patterns=patterns,
        recent_meals=list(recent_meals),
        weekend_variance=weekend_variance(recent_meals) or 0.0,
        goal_type=goal_type,
    )


def context_summary(context: CoachingContext) -> str:
    """Render a short progress summary for a chat coach prompt."""
    remaining = context.remaining
    daily_calories = round_half_up(context.goals.daily_calories)
    parts = [f"It's {remaining.time_of_day} and you're"]

    calorie_progress = context.today.calories.percentage
    if calorie_progress < 0.5:
        parts.append(
            "getting started with your nutrition today. You have "
            f"{round_half_up(remaining.calories)} calories remaining to reach your "
            f"{daily_calories} calorie goal."
        )
    elif 0.8 <= calorie_progress <= 1.2:
        parts.append(
            "doing great with your nutrition today! You're right on track with "
            "your calorie goal."
        )
    elif calorie_progress > 1.2:
        parts.append(
            "over your calorie goal for today. Let's focus on lighter options "
            "for the rest of the day."
        )
    else:
        parts.append("making steady progress toward your calorie goal today.")

    parts.append(
        f"Your {context.goal_type} goal requires {daily_calories} calories daily."
    )

    protein_progress = context.today.macros.protein.percentage
    if protein_progress < 0.7:
        parts.append(
            "You could use more protein today "
            f"({round_half_up(remaining.protein_g)}g remaining)."
        )
    elif protein_progress >= 1.0:
        parts.append("Great job hitting your protein target!")

    adherence_percent = round_half_up(context.adherence_score * 100)
    if context.adherence_score > 0.8:
        parts.append(
            "You've been very consistent this week with "
            f"{adherence_percent}% goal adherence."
        )
    elif context.adherence_score < 0.6:
        parts.append(
            f"This week has been challenging with {adherence_percent}% goal "
            "adherence. Let's focus on getting back on track."
        )
    return " ".join(parts)
