from datetime import date
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DailyTargets(BaseModel):
    """BMR, TDEE and the resulting calorie goal for one set of metrics."""

    bmr: int
    tdee: int
    calorie_goal: int = Field(..., alias="calorieGoal")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class DailySummary(BaseModel):
    """
    Everything the dashboard shows for one user and day, stored in the
    'dailySummaries' collection.
    """

    uid: str
    date: date
    calorie_goal: int = Field(..., alias="calorieGoal")
    calories_consumed: int = Field(..., alias="caloriesConsumed")
    calories_burned: int = Field(..., alias="caloriesBurned")
    calories_remaining: int = Field(
        ...,
        alias="caloriesRemaining",
        description="Goal minus consumed plus burned. Negative when over goal.",
    )
    consumed_percentage: float = Field(..., alias="consumedPercentage")
    active_minutes: int = Field(..., alias="activeMinutes")
    workouts_completed: int = Field(..., alias="workoutsCompleted")
    calories_by_meal: Dict[str, int] = Field(..., alias="caloriesByMeal")
    weight_progress_percentage: Optional[float] = Field(
        default=None, alias="weightProgressPercentage"
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
