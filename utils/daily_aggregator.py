"""
Reductions over one day's logged food and exercise entries.

Entries may be ``LoggedEntry`` models or plain mappings (as returned by the
store), keyed either in snake_case or camelCase. Nothing here mutates its
input.
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable

from pydantic.alias_generators import to_camel

from models.entry import EntryKind, MealType


def _entry_value(entry: Any, field: str, default: Any = 0) -> Any:
    if isinstance(entry, Mapping):
        value = entry.get(field, entry.get(to_camel(field), default))
    else:
        value = getattr(entry, field, default)
    return default if value is None else value


def sum_calories(entries: Iterable[Any]) -> int:
    return sum(int(_entry_value(entry, "calories")) for entry in entries)


def sum_duration(entries: Iterable[Any]) -> int:
    return sum(int(_entry_value(entry, "duration_minutes")) for entry in entries)


def remaining_calories(goal: int, consumed: int, burned: int) -> int:
    """Goal minus food plus exercise. Negative means the user is over goal."""
    return goal - consumed + burned


def consumed_percentage(consumed: int, goal: int) -> float:
    if goal <= 0:
        return 0.0
    return max(0.0, min(100.0, consumed / goal * 100))


def calories_by_meal(entries: Iterable[Any]) -> Dict[str, int]:
    """Per-meal subtotals; every meal section is present even when empty."""
    totals = {meal.value: 0 for meal in MealType}
    for entry in entries:
        meal = _entry_value(entry, "meal_type", None)
        if meal is None:
            continue
        meal = meal.value if isinstance(meal, MealType) else str(meal).lower()
        if meal in totals:
            totals[meal] += int(_entry_value(entry, "calories"))
    return totals


def count_workouts(entries: Iterable[Any]) -> int:
    count = 0
    for entry in entries:
        kind = _entry_value(entry, "kind", EntryKind.EXERCISE)
        if kind == EntryKind.EXERCISE:
            count += 1
    return count
