"""FastAPI application factory."""

import logging
from dataclasses import asdict
from datetime import datetime

from fastapi import Depends, FastAPI, Header, HTTPException, Request, status

from nutrition_coach.api.models import AnalysisRequest
from nutrition_coach.app_logging import configure_logging
from nutrition_coach.containers import AppContainer
from nutrition_coach.services.context import build_coaching_context, context_summary
from nutrition_coach.services.progress import (
    build_daily_progress,
    build_weekly_trends,
)
from nutrition_coach.services.recommendations import personalized_recommendations


def _get_api_token(request: Request) -> str | None:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_api_token(
    x_api_token: str | None = Header(default=None),
    api_token: str | None = Depends(_get_api_token),
) -> None:
    """Ensure requests carry the configured API token, when one is set."""
    if api_token is None:
        return
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.debug)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/analysis", dependencies=[Depends(require_api_token)])
    async def analysis(payload: AnalysisRequest, request: Request) -> dict[str, object]:
        """Run a comprehensive progress analysis for one user's history."""
        state_container: AppContainer = request.app.state.container
        now = datetime.now(tz=state_container.timezone)
        today = payload.today or now.date()
        hour = payload.current_hour if payload.current_hour is not None else now.hour

        meals = [meal.to_domain() for meal in payload.meals]
        goals = payload.goals.to_domain()
        daily_progress = [day.to_domain() for day in payload.daily_progress]
        if not daily_progress:
            logged_days = dict.fromkeys(meal.date for meal in meals)
            daily_progress = [
                build_daily_progress(day, meals, goals) for day in logged_days
            ]
        weekly_trends = [week.to_domain() for week in payload.weekly_trends]
        if not weekly_trends:
            weekly_trends = build_weekly_trends(meals, goals, today)
        today_progress = (
            payload.today_progress.to_domain()
            if payload.today_progress is not None
            else build_daily_progress(today.isoformat(), meals, goals)
        )

        context = build_coaching_context(
            today_progress,
            weekly_trends,
            meals,
            goals=goals,
            current_hour=hour,
            goal_type=payload.goal_type,
            daily_progress=daily_progress,
            pattern_analyzer=state_container.analysis_service.pattern_analyzer,
        )
        result = state_container.analysis_service.analyze(
            meals, daily_progress, weekly_trends, goals, context
        )
        logger.info(
            "Analysis served: meals=%s patterns=%s insights=%s",
            len(meals),
            len(result.eating_patterns),
            len(result.insights),
        )
        return {
            **asdict(result),
            "summary": context_summary(context),
            "personalized": asdict(personalized_recommendations(context)),
        }

    return app
