"""Tests for catalog-based exercise calorie estimates."""

from __future__ import annotations

import math
from datetime import datetime, timezone

import pytest

from models.entry import EntryKind, Intensity
from models.exercise import ExerciseCatalogEntry
from utils.exceptions import InvalidMeasurement, UnknownExercise
from utils.exercise_estimator import (
    DEFAULT_EXERCISE_CATALOG,
    build_catalog,
    build_exercise_entry,
    estimate_calories,
)


@pytest.fixture
def catalog():
    return build_catalog(
        [
            ExerciseCatalogEntry(name="Running", category="Cardio", calories_per_minute=10),
            ExerciseCatalogEntry(name="Rowing", category="Cardio", calories_per_minute=7.5),
        ]
    )


class TestEstimateCalories:
    def test_running(self, catalog) -> None:
        assert estimate_calories(catalog, "Running", 30) == 300

    def test_rounds_half_up(self, catalog) -> None:
        # 7.5 * 3 = 22.5
        assert estimate_calories(catalog, "Rowing", 3) == 23

    def test_zero_duration(self, catalog) -> None:
        assert estimate_calories(catalog, "Running", 0) == 0

    def test_unknown(self, catalog) -> None:
        with pytest.raises(UnknownExercise) as exc_info:
            estimate_calories(catalog, "Unknown", 10)
        assert exc_info.value.name == "Unknown"

    def test_exact_name_match_only(self, catalog) -> None:
        with pytest.raises(UnknownExercise):
            estimate_calories(catalog, "running", 10)

    @pytest.mark.parametrize("duration", [-5, math.nan, math.inf, "thirty", None])
    def test_invalid_duration(self, catalog, duration) -> None:
        with pytest.raises(InvalidMeasurement):
            estimate_calories(catalog, "Running", duration)

    def test_duration_from_form_string(self, catalog) -> None:
        assert estimate_calories(catalog, "Running", "30") == 300


class TestCatalog:
    def test_default_catalog(self) -> None:
        assert len(DEFAULT_EXERCISE_CATALOG) == 8
        assert estimate_calories(DEFAULT_EXERCISE_CATALOG, "HIIT", 20) == 300
        assert DEFAULT_EXERCISE_CATALOG["Yoga"].category == "Flexibility"

    def test_duplicate_names_rejected(self) -> None:
        entry = ExerciseCatalogEntry(name="Yoga", category="Flexibility", calories_per_minute=3)
        with pytest.raises(ValueError):
            build_catalog([entry, entry])

    def test_rate_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            ExerciseCatalogEntry(name="Nap", category="Rest", calories_per_minute=0)


class TestBuildExerciseEntry:
    def test_catalog_exercise(self, catalog) -> None:
        when = datetime(2024, 3, 14, 7, tzinfo=timezone.utc)
        entry = build_exercise_entry(
            catalog, "Running", 30, intensity=Intensity.MODERATE, timestamp=when
        )
        assert entry.kind == EntryKind.EXERCISE
        assert entry.calories == 300
        assert entry.duration_minutes == 30
        assert entry.category == "Cardio"
        assert entry.timestamp == when

    def test_manual_fallback(self, catalog) -> None:
        entry = build_exercise_entry(catalog, "Rock Climbing", 45, manual_calories=400)
        assert entry.calories == 400
        assert entry.category == "Other"

    def test_manual_ignored_for_catalog_exercise(self, catalog) -> None:
        entry = build_exercise_entry(catalog, "Running", 10, manual_calories=999)
        assert entry.calories == 100

    def test_manual_calories_from_form_string(self, catalog) -> None:
        entry = build_exercise_entry(catalog, "Rock Climbing", "45", manual_calories="400")
        assert entry.calories == 400
        assert entry.duration_minutes == 45

    @pytest.mark.parametrize("manual", [-1, math.nan, math.inf, "lots"])
    def test_invalid_manual_calories(self, catalog, manual) -> None:
        with pytest.raises(InvalidMeasurement):
            build_exercise_entry(catalog, "Rock Climbing", 45, manual_calories=manual)

    def test_invalid_duration_for_unknown_exercise(self, catalog) -> None:
        with pytest.raises(InvalidMeasurement):
            build_exercise_entry(catalog, "Rock Climbing", math.nan, manual_calories=400)

    def test_unknown_without_fallback(self, catalog) -> None:
        with pytest.raises(UnknownExercise):
            build_exercise_entry(catalog, "Rock Climbing", 45)
