"""
Metric/imperial conversions for height and body weight.

Whole-unit results are rounded half-up, so round trips are lossy:
``inches_to_cm(cm_to_inches(x))`` lands within 1.27 cm of ``x`` for whole
centimetres and within 1.77 cm (half an inch plus half a centimetre) for
fractional input. Heights under 1.27 cm convert to 0 inches; that result is
returned as-is, and passing it back to ``inches_to_cm`` raises
InvalidMeasurement like any other non-positive input.
"""

import math

import config
from utils.exceptions import InvalidMeasurement


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Rounds like a form field would: 0.5 always goes up."""
    scale = 10**ndigits
    return math.floor(value * scale + 0.5) / scale


def positive_measurement(value, label: str = "measurement") -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidMeasurement(f"{label} must be a number, got {value!r}.")
    if not math.isfinite(number) or number <= 0:
        raise InvalidMeasurement(f"{label} must be a positive number, got {value!r}.")
    return number


def non_negative_measurement(value, label: str = "measurement") -> float:
    """Like positive_measurement, but 0 is allowed (durations, manual calories)."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidMeasurement(f"{label} must be a number, got {value!r}.")
    if not math.isfinite(number) or number < 0:
        raise InvalidMeasurement(
            f"{label} must be zero or a positive number, got {value!r}."
        )
    return number


def cm_to_inches(cm: float) -> int:
    cm = positive_measurement(cm, "height_cm")
    return int(round_half_up(cm / config.CM_PER_INCH))


def inches_to_cm(inches: float) -> int:
    inches = positive_measurement(inches, "height_in")
    return int(round_half_up(inches * config.CM_PER_INCH))


def kg_to_lbs(kg: float) -> int:
    kg = positive_measurement(kg, "weight_kg")
    return int(round_half_up(kg * config.LBS_PER_KG))


def lbs_to_kg(lbs: float) -> float:
    """Converts pounds to kilograms, keeping two decimal places."""
    lbs = positive_measurement(lbs, "weight_lbs")
    return round_half_up(lbs / config.LBS_PER_KG, 2)
