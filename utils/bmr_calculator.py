import logging
import math
from typing import Optional, Union

import config
from models.daily_summary import DailyTargets
from models.profile import ActivityLevel, Gender, Goal, UserMetrics
from utils.exceptions import InvalidMetrics
from utils.unit_converter import round_half_up


def _check_metrics(metrics: UserMetrics) -> None:
    checks = {
        "age": metrics.age,
        "height_cm": metrics.height_cm,
        "current_weight_kg": metrics.current_weight_kg,
    }
    for field, value in checks.items():
        if not math.isfinite(value) or value <= 0:
            raise InvalidMetrics(f"{field} must be greater than zero, got {value}.")


def calculate_harris_benedict_bmr(metrics: UserMetrics) -> int:
    """Calculates BMR using the revised Harris-Benedict equation."""
    _check_metrics(metrics)
    weight_kg = metrics.current_weight_kg
    height_cm = metrics.height_cm
    age = metrics.age
    if metrics.gender == Gender.MALE:
        bmr = 88.362 + (13.397 * weight_kg) + (4.799 * height_cm) - (5.677 * age)
    else:
        bmr = 447.593 + (9.247 * weight_kg) + (3.098 * height_cm) - (4.330 * age)
    return int(round_half_up(bmr))


def activity_multiplier(activity_level: Optional[Union[ActivityLevel, str]]) -> float:
    """
    Looks up the activity factor. Missing or unrecognised levels use
    DEFAULT_ACTIVITY_MULTIPLIER (the 'moderate' factor) rather than failing.
    """
    key = (
        activity_level.value
        if isinstance(activity_level, ActivityLevel)
        else activity_level
    )
    multiplier = config.ACTIVITY_LEVEL_MAPPING.get(key)
    if multiplier is None:
        logging.warning(
            f"Unrecognised activity level {activity_level!r}; "
            f"using default multiplier {config.DEFAULT_ACTIVITY_MULTIPLIER}."
        )
        return config.DEFAULT_ACTIVITY_MULTIPLIER
    return multiplier


def calculate_tdee(
    bmr: float, activity_level: Optional[Union[ActivityLevel, str]]
) -> int:
    return int(round_half_up(bmr * activity_multiplier(activity_level)))


def calculate_calorie_goal(
    tdee: float,
    goal: Optional[Union[Goal, str]],
    adjustment_kcal: float = config.CALORIE_GOAL_ADJUSTMENT_KCAL,
) -> float:
    """
    Applies the daily deficit or surplus for the user's goal. Maintain and
    unrecognised goals return the TDEE unchanged.
    """
    key = goal.value if isinstance(goal, Goal) else goal
    if key == Goal.LOSE_WEIGHT.value:
        return tdee - adjustment_kcal
    if key == Goal.GAIN_WEIGHT.value:
        return tdee + adjustment_kcal
    return tdee


def calculate_daily_targets(
    metrics: UserMetrics,
    adjustment_kcal: float = config.CALORIE_GOAL_ADJUSTMENT_KCAL,
) -> DailyTargets:
    bmr = calculate_harris_benedict_bmr(metrics)
    tdee = calculate_tdee(bmr, metrics.activity_level)
    goal = calculate_calorie_goal(tdee, metrics.goal, adjustment_kcal)
    return DailyTargets(bmr=bmr, tdee=tdee, calorie_goal=int(round_half_up(goal)))
