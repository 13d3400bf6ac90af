"""Pydantic models for the analysis API payloads."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from nutrition_coach.domain.meals import LoggedMeal, MealType, NutritionGoals
from nutrition_coach.domain.progress import (
    CalorieProgress,
    DailyProgress,
    MacroBreakdown,
    MacroProgress,
    ProgressStatus,
    WeeklyTrend,
)


class LoggedMealPayload(BaseModel):
    """Logged meal payload."""

    date: date
    meal_type: MealType
    calories: float = Field(ge=0)
    protein_g: float = Field(ge=0)
    carbs_g: float = Field(ge=0)
    fats_g: float = Field(ge=0)
    logged_at: datetime | None = None

    def to_domain(self) -> LoggedMeal:
        return LoggedMeal(
            date=self.date.isoformat(),
            meal_type=self.meal_type,
            calories=self.calories,
            protein_g=self.protein_g,
            carbs_g=self.carbs_g,
            fats_g=self.fats_g,
            logged_at=self.logged_at,
        )


class NutritionGoalsPayload(BaseModel):
    """Nutrition goals payload."""

    daily_calories: float = Field(ge=0)
    protein_g: float = Field(ge=0)
    carbs_g: float = Field(ge=0)
    fats_g: float = Field(ge=0)

    def to_domain(self) -> NutritionGoals:
        return NutritionGoals(
            daily_calories=self.daily_calories,
            protein_g=self.protein_g,
            carbs_g=self.carbs_g,
            fats_g=self.fats_g,
        )


class CalorieProgressPayload(BaseModel):
    """Calorie progress payload."""

    consumed: float = Field(ge=0)
    goal: float = Field(ge=0)
    remaining: float = Field(ge=0)
    percentage: float = Field(ge=0)


class MacroProgressPayload(BaseModel):
    """Single macro progress payload."""

    consumed: float = Field(ge=0)
    goal: float = Field(ge=0)
    percentage: float = Field(ge=0)

    def to_domain(self) -> MacroProgress:
        return MacroProgress(
            consumed=self.consumed, goal=self.goal, percentage=self.percentage
        )


class MacroBreakdownPayload(BaseModel):
    """Macro breakdown payload."""

    protein: MacroProgressPayload
    carbs: MacroProgressPayload
    fats: MacroProgressPayload


class DailyProgressPayload(BaseModel):
    """Daily progress payload."""

    date: date
    calories: CalorieProgressPayload
    macros: MacroBreakdownPayload
    status: ProgressStatus

    def to_domain(self) -> DailyProgress:
        return DailyProgress(
            date=self.date.isoformat(),
            calories=CalorieProgress(
                consumed=self.calories.consumed,
                goal=self.calories.goal,
                remaining=self.calories.remaining,
                percentage=self.calories.percentage,
            ),
            macros=MacroBreakdown(
                protein=self.macros.protein.to_domain(),
                carbs=self.macros.carbs.to_domain(),
                fats=self.macros.fats.to_domain(),
            ),
            status=self.status,
        )


class WeeklyTrendPayload(BaseModel):
    """Weekly trend payload."""

    week_start_date: date
    average_calories: float = Field(ge=0)
    goal_adherence: float = Field(ge=0, le=100)
    total_days: int = Field(ge=0, le=7)
    days_met_goal: int = Field(ge=0, le=7)

    def to_domain(self) -> WeeklyTrend:
        return WeeklyTrend(
            week_start_date=self.week_start_date.isoformat(),
            average_calories=self.average_calories,
            goal_adherence=self.goal_adherence,
            total_days=self.total_days,
            days_met_goal=self.days_met_goal,
        )


class AnalysisRequest(BaseModel):
    """Request body for a comprehensive analysis run.

    Daily progress and weekly trends are derived from the meals when omitted.
    Weekly trends must be ordered oldest first.
    """

    meals: list[LoggedMealPayload]
    goals: NutritionGoalsPayload
    daily_progress: list[DailyProgressPayload] = Field(default_factory=list)
    weekly_trends: list[WeeklyTrendPayload] = Field(default_factory=list)
    today: date | None = None
    today_progress: DailyProgressPayload | None = None
    current_hour: int | None = Field(default=None, ge=0, le=23)
    goal_type: str = "maintain"
