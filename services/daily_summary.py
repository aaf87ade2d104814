from datetime import date
from typing import Any, Sequence

import config
from models.daily_summary import DailySummary
from models.profile import UserProfile
from utils.bmr_calculator import calculate_daily_targets
from utils.daily_aggregator import (
    calories_by_meal,
    consumed_percentage,
    count_workouts,
    remaining_calories,
    sum_calories,
    sum_duration,
)
from utils.progress_tracker import progress_percentage


def build_daily_summary(
    uid: str,
    day: date,
    profile: UserProfile,
    food_entries: Sequence[Any],
    exercise_entries: Sequence[Any],
    adjustment_kcal: float = config.CALORIE_GOAL_ADJUSTMENT_KCAL,
) -> DailySummary:
    """
    Combines the user's calorie target with the day's food and exercise logs
    into the numbers shown on the dashboard.

    Raises InvalidMetrics when the profile cannot produce a calorie target.
    """
    targets = calculate_daily_targets(profile.to_metrics(), adjustment_kcal)
    consumed = sum_calories(food_entries)
    burned = sum_calories(exercise_entries)

    weight_progress = None
    if profile.start_weight_kg is not None and profile.goal_weight_kg is not None:
        weight_progress = progress_percentage(
            profile.start_weight_kg, profile.weight_kg, profile.goal_weight_kg
        )

    return DailySummary(
        uid=uid,
        date=day,
        calorie_goal=targets.calorie_goal,
        calories_consumed=consumed,
        calories_burned=burned,
        calories_remaining=remaining_calories(targets.calorie_goal, consumed, burned),
        consumed_percentage=consumed_percentage(consumed, targets.calorie_goal),
        active_minutes=sum_duration(exercise_entries),
        workouts_completed=count_workouts(exercise_entries),
        calories_by_meal=calories_by_meal(food_entries),
        weight_progress_percentage=weight_progress,
    )
