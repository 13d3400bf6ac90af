"""Domain models produced by progress analysis."""

from dataclasses import dataclass, field
from enum import StrEnum

from nutrition_coach.domain.meals import LoggedMeal, MealType, NutritionGoals
from nutrition_coach.domain.progress import DailyProgress, RemainingTargets


class PatternType(StrEnum):
    """Kinds of eating pattern findings."""

    MEAL_TIMING = "meal_timing"
    CALORIE_CONSISTENCY = "calorie_consistency"
    MACRO_DISTRIBUTION = "macro_distribution"
    MEAL_FREQUENCY = "meal_frequency"
    WEEKEND_VARIANCE = "weekend_variance"


class Impact(StrEnum):
    """How a pattern affects progress."""

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    CONCERNING = "concerning"


class Priority(StrEnum):
    """Ranking bucket for insights and recommendations."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def weight(self) -> int:
        """Numeric weight used for ordering."""
        return _PRIORITY_WEIGHTS[self]


_PRIORITY_WEIGHTS = {Priority.HIGH: 3, Priority.MEDIUM: 2, Priority.LOW: 1}


class TrendDirection(StrEnum):
    """Direction of a week-over-week change."""

    IMPROVING = "improving"
    DECLINING = "declining"


class InsightType(StrEnum):
    """Tone of a coaching insight."""

    CELEBRATION = "celebration"
    SUGGESTION = "suggestion"
    ENCOURAGEMENT = "encouragement"
    EDUCATION = "education"


class RecommendationType(StrEnum):
    """Horizon of a recommendation."""

    IMMEDIATE = "immediate"
    DAILY = "daily"
    WEEKLY = "weekly"
    LIFESTYLE = "lifestyle"


@dataclass(frozen=True)
class EatingPattern:
    """A behavioral finding with a confidence weight."""

    type: PatternType
    description: str
    frequency: float
    impact: Impact
    suggestion: str
    confidence: float


@dataclass(frozen=True)
class ProgressTrend:
    """A significant week-over-week change in one metric."""

    metric: str
    direction: TrendDirection
    magnitude: float
    timeframe: str
    significance: Priority
    description: str


@dataclass(frozen=True)
class CoachingInsight:
    """A ranked coaching message."""

    type: InsightType
    priority: Priority
    message: str
    actionable: bool
    timeframe: str
    related_goal: str | None = None
    confidence: float = 0.5


@dataclass(frozen=True)
class AnalysisRecommendation:
    """A multi-step plan addressing a concerning pattern or trend."""

    type: RecommendationType
    priority: Priority
    title: str
    description: str
    action_steps: list[str]
    expected_impact: str
    timeframe: str


@dataclass(frozen=True)
class MealTimingAnalysis:
    """Timing profile of one meal type."""

    meal_type: MealType
    average_hour: float
    consistency: float
    window_start: int
    window_end: int
    deviation: float


@dataclass(frozen=True)
class PatternTrendSummary:
    """Coarse behavioral summary used by the quality scorer."""

    meal_timing_consistency: float
    weekend_variance: float
    protein_distribution: str
    calorie_distribution: str
    adherence_trend: str


@dataclass(frozen=True)
class NutritionQualityScore:
    """Overall nutrition quality with its sub-scores."""

    overall: float
    macro_balance: float
    consistency: float
    timing: float
    adherence: float
    strengths: list[str]
    improvements: list[str]


@dataclass(frozen=True)
class PersonalizedRecommendations:
    """Short recommendations grouped by horizon."""

    immediate: list[str] = field(default_factory=list)
    daily: list[str] = field(default_factory=list)
    weekly: list[str] = field(default_factory=list)
    long_term: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class CoachingContext:
    """Everything the insight generator knows about the user right now."""

    goals: NutritionGoals
    today: DailyProgress
    remaining: RemainingTargets
    adherence_score: float
    current_hour: int
    trends: list[ProgressTrend] = field(default_factory=list)
    patterns: list[EatingPattern] = field(default_factory=list)
    recent_meals: list[LoggedMeal] = field(default_factory=list)
    weekend_variance: float = 0.0
    goal_type: str = "maintain"


@dataclass(frozen=True)
class ProgressAnalysisResult:
    """Aggregate output of a comprehensive analysis run."""

    eating_patterns: list[EatingPattern]
    adherence_score: float
    trends: list[ProgressTrend]
    insights: list[CoachingInsight]
    recommendations: list[AnalysisRecommendation]
    quality: NutritionQualityScore
