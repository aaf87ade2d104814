# fitness_metrics/config.py
import os

# --- Unit Conversion Factors ---
CM_PER_INCH = 2.54
LBS_PER_KG = 2.20462

# --- Energy Balance Constants ---

# Roughly 3500 kcal per lb of body weight, so 500 kcal/day is ~1 lb/week.
KCAL_PER_LB_BODY_WEIGHT = 3500.0

# Problems found while reading environment overrides. Logged when the job
# starts, since logging is not configured yet at import time.
CONFIG_ERRORS = []


def read_kcal_setting(name: str, default: float) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return round(default)
    try:
        return round(float(raw))
    except (ValueError, OverflowError):
        CONFIG_ERRORS.append(
            f"{name}={raw!r} is not a number; using default {round(default)}."
        )
        return round(default)


# Daily deficit (lose_weight) or surplus (gain_weight) applied to TDEE.
CALORIE_GOAL_ADJUSTMENT_KCAL = read_kcal_setting(
    "FITNESS_CALORIE_GOAL_ADJUSTMENT_KCAL", KCAL_PER_LB_BODY_WEIGHT / 7
)

# --- Activity Multipliers ---
# Maps user-reported activity level to a Harris-Benedict activity factor.
ACTIVITY_LEVEL_MAPPING = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "very_active": 1.9,
}
# Used when the activity level is missing or unrecognised (moderate).
DEFAULT_ACTIVITY_MULTIPLIER = ACTIVITY_LEVEL_MAPPING["moderate"]

# Category given to exercises logged outside the catalog.
MANUAL_EXERCISE_CATEGORY = "Other"

# --- Store Layout ---
USERS_COLLECTION = "users"
FOOD_LOGS_COLLECTION = "foodLogs"
EXERCISE_LOGS_COLLECTION = "exerciseLogs"
DAILY_SUMMARIES_COLLECTION = "dailySummaries"

SERVICE_ACCOUNT_PATH = os.environ.get(
    "FITNESS_SERVICE_ACCOUNT_PATH",
    os.path.join(os.path.dirname(__file__), "service-account.json"),
)
