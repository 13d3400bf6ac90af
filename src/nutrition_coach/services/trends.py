"""Week-over-week trend detection."""

from nutrition_coach.domain.analysis import Priority, ProgressTrend, TrendDirection
from nutrition_coach.domain.progress import WeeklyTrend
from nutrition_coach.services.aggregation import round_half_up

MIN_CHANGE_PERCENT = 5.0

_TRACKED_METRICS = (
    ("average_calories", "calories"),
    ("goal_adherence", "adherence"),
)


def significance_for(magnitude: float) -> Priority:
    """Bucket an absolute percentage change."""
    if magnitude > 20:
        return Priority.HIGH
    if magnitude > 10:
        return Priority.MEDIUM
    return Priority.LOW


def detect_trends(weekly_trends: list[WeeklyTrend]) -> list[ProgressTrend]:
    """Compare the two most recent weeks of a chronological list.

    The last entry is the recent week. A rise in any metric is reported as
    improving and a drop as declining.
    """
    if len(weekly_trends) < 2:
        return []

    recent = weekly_trends[-1]
    previous = weekly_trends[-2]
    trends = []
    for attribute, name in _TRACKED_METRICS:
        previous_value = getattr(previous, attribute)
        recent_value = getattr(recent, attribute)
        if previous_value <= 0:
            continue
        change = (recent_value - previous_value) * 100 / previous_value
        magnitude = abs(change)
        if magnitude <= MIN_CHANGE_PERCENT:
            continue
        rising = change > 0
        trends.append(
            ProgressTrend(
                metric=name,
                direction=(
                    TrendDirection.IMPROVING if rising else TrendDirection.DECLINING
                ),
                magnitude=magnitude,
                timeframe="week",
                significance=significance_for(magnitude),
                description=(
                    f"{name.capitalize()} {'increased' if rising else 'decreased'} "
                    f"by {round_half_up(magnitude)}% this week"
                ),
            )
        )
    return trends
