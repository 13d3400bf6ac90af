"""Comprehensive progress analysis pipeline."""

import logging
from dataclasses import dataclass, field, replace

from nutrition_coach.domain.analysis import CoachingContext, ProgressAnalysisResult
from nutrition_coach.domain.meals import LoggedMeal, NutritionGoals
from nutrition_coach.domain.progress import DailyProgress, WeeklyTrend
from nutrition_coach.services.adherence import adherence_score
from nutrition_coach.services.insights import generate_insights
from nutrition_coach.services.patterns import PatternAnalyzer, weekend_variance
from nutrition_coach.services.progress import remaining_targets
from nutrition_coach.services.quality import quality_score
from nutrition_coach.services.recommendations import generate_recommendations
from nutrition_coach.services.trends import detect_trends

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisService:
    """Runs the analysis pipeline for one user's history.

    Holds no per-user state; every call works only on its arguments.
    """

    pattern_analyzer: PatternAnalyzer = field(default_factory=PatternAnalyzer)
    debug: bool = False

    def analyze(  # noqa: PLR0913
        self,
        meals: list[LoggedMeal],
        daily_progress: list[DailyProgress],
        weekly_trends: list[WeeklyTrend],
        goals: NutritionGoals,
        context: CoachingContext,
    ) -> ProgressAnalysisResult:
        """Detect patterns, score adherence and trends, then rank coaching output.

        Every context field derived from meals or goals is recomputed from the
        arguments, so the insights and the quality score describe the same
        history as the patterns.
        """
        patterns = self.pattern_analyzer.analyze(meals, goals)
        score = adherence_score(daily_progress, goals)
        trends = detect_trends(weekly_trends)

        enriched = replace(
            context,
            goals=goals,
            remaining=remaining_targets(context.today, goals, context.current_hour),
            patterns=patterns,
            adherence_score=score,
            trends=trends,
            recent_meals=list(meals),
            weekend_variance=weekend_variance(meals) or 0.0,
        )
        insights = generate_insights(enriched)
        recommendations = generate_recommendations(patterns, trends, enriched)
        quality = quality_score(enriched, self.pattern_analyzer.timing_strategy)

        if self.debug:
            _logger.info(
                "Analysis run: meals=%s days=%s weeks=%s patterns=%s trends=%s "
                "insights=%s recommendations=%s adherence=%.2f quality=%.2f",
                len(meals),
                len(daily_progress),
                len(weekly_trends),
                len(patterns),
                len(trends),
                len(insights),
                len(recommendations),
                score,
                quality.overall,
            )
        return ProgressAnalysisResult(
            eating_patterns=patterns,
            adherence_score=score,
            trends=trends,
            insights=insights,
            recommendations=recommendations,
            quality=quality,
        )


def perform_comprehensive_analysis(  # noqa: PLR0913
    meals: list[LoggedMeal],
    daily_progress: list[DailyProgress],
    weekly_trends: list[WeeklyTrend],
    goals: NutritionGoals,
    context: CoachingContext,
) -> ProgressAnalysisResult:
    """Run the full pipeline with the default analyzer."""
    return AnalysisService().analyze(
        meals, daily_progress, weekly_trends, goals, context
    )
