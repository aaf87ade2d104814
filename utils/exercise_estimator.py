from datetime import datetime
from typing import Dict, Iterable, Mapping, Optional

import config
from models.entry import EntryKind, Intensity, LoggedEntry
from models.exercise import DEFAULT_EXERCISES, ExerciseCatalogEntry
from utils.exceptions import UnknownExercise
from utils.unit_converter import non_negative_measurement, round_half_up


def build_catalog(
    entries: Iterable[ExerciseCatalogEntry],
) -> Dict[str, ExerciseCatalogEntry]:
    """Indexes catalog entries by name. Names must be unique."""
    catalog: Dict[str, ExerciseCatalogEntry] = {}
    for entry in entries:
        if entry.name in catalog:
            raise ValueError(f"Duplicate exercise name in catalog: {entry.name}")
        catalog[entry.name] = entry
    return catalog


DEFAULT_EXERCISE_CATALOG = build_catalog(DEFAULT_EXERCISES)


def estimate_calories(
    catalog: Mapping[str, ExerciseCatalogEntry], name: str, duration_minutes: int
) -> int:
    """
    Estimated burn for `duration_minutes` of the named exercise. The name must
    match a catalog key exactly; there is no guessing for unknown exercises.
    """
    duration_minutes = non_negative_measurement(duration_minutes, "duration_minutes")
    entry = catalog.get(name)
    if entry is None:
        raise UnknownExercise(name)
    return int(round_half_up(entry.calories_per_minute * duration_minutes))


def build_exercise_entry(
    catalog: Mapping[str, ExerciseCatalogEntry],
    name: str,
    duration_minutes: int,
    manual_calories: Optional[int] = None,
    intensity: Optional[Intensity] = None,
    timestamp: Optional[datetime] = None,
) -> LoggedEntry:
    """
    Builds the entry to insert for a logged workout. Catalog exercises get an
    estimated burn; anything else needs `manual_calories`, otherwise the
    UnknownExercise error reaches the caller.
    """
    duration_minutes = non_negative_measurement(duration_minutes, "duration_minutes")
    try:
        calories = estimate_calories(catalog, name, duration_minutes)
        category = catalog[name].category
    except UnknownExercise:
        if manual_calories is None:
            raise
        calories = int(
            round_half_up(non_negative_measurement(manual_calories, "manual_calories"))
        )
        category = config.MANUAL_EXERCISE_CATEGORY

    fields = dict(
        name=name,
        kind=EntryKind.EXERCISE,
        calories=calories,
        duration_minutes=int(round_half_up(duration_minutes)),
        category=category,
        intensity=intensity,
    )
    if timestamp is not None:
        fields["timestamp"] = timestamp
    return LoggedEntry(**fields)
