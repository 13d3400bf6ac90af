"""Dependency container wiring for the application."""

from dataclasses import dataclass
from zoneinfo import ZoneInfo

from nutrition_coach.config import Settings
from nutrition_coach.services.analysis import AnalysisService
from nutrition_coach.services.patterns import PatternAnalyzer
from nutrition_coach.services.timing import PlaceholderTimingStrategy


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    timezone: ZoneInfo
    analysis_service: AnalysisService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    timezone = ZoneInfo(resolved_settings.default_timezone)
    pattern_analyzer = PatternAnalyzer(timing_strategy=PlaceholderTimingStrategy())
    analysis_service = AnalysisService(
        pattern_analyzer=pattern_analyzer,
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        timezone=timezone,
        analysis_service=analysis_service,
    )
