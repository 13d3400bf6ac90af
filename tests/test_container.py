"""Tests for container wiring."""

from nutrition_coach.config import Settings
from nutrition_coach.containers import build_container
from nutrition_coach.services.timing import PlaceholderTimingStrategy


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.analysis_service is not None
    assert isinstance(
        container.analysis_service.pattern_analyzer.timing_strategy,
        PlaceholderTimingStrategy,
    )
    assert str(container.timezone) == "UTC"


def test_debug_setting_reaches_analysis_service() -> None:
    container = build_container(Settings(debug=True, default_timezone="UTC"))

    assert container.analysis_service.debug is True
