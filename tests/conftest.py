"""Pytest fixtures for fitness metrics tests."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from models.entry import EntryKind, LoggedEntry, MealType
from models.profile import ActivityLevel, Gender, Goal, UserMetrics, UserProfile
from models.user import UserInDB

TODAY = date(2024, 3, 14)


def _at(hour: int) -> datetime:
    return datetime(2024, 3, 14, hour, 0, tzinfo=timezone.utc)


class FakeStore:
    """In-memory stand-in for the Firestore service."""

    def __init__(self, users=None, entries=None):
        self.users = list(users or [])
        # {(uid, kind): [LoggedEntry, ...]}
        self.entries = dict(entries or {})
        self.profiles = {}
        self.summaries = []
        self.failing_uids = set()
        self._next_id = 0

    async def get_all_users(self):
        for user in self.users:
            yield user

    async def fetch_entries_for_date(self, uid, day, kind):
        if uid in self.failing_uids:
            raise RuntimeError("store unavailable")
        return [
            entry
            for entry in self.entries.get((uid, EntryKind(kind)), [])
            if entry.timestamp.date() == day
        ]

    async def insert_entry(self, uid, entry):
        self._next_id += 1
        stored = entry.model_copy(update={"id": str(self._next_id)})
        self.entries.setdefault((uid, stored.kind), []).append(stored)
        return stored

    async def delete_entry(self, uid, entry_id, kind):
        key = (uid, EntryKind(kind))
        self.entries[key] = [e for e in self.entries.get(key, []) if e.id != entry_id]

    async def fetch_profile(self, uid):
        return self.profiles.get(uid)

    async def upsert_profile(self, uid, profile):
        self.profiles[uid] = profile

    async def save_daily_summary(self, summary):
        self.summaries.append(summary)


@pytest.fixture
def male_metrics() -> UserMetrics:
    return UserMetrics(
        gender=Gender.MALE,
        age=30,
        height_cm=180,
        current_weight_kg=80,
        activity_level=ActivityLevel.SEDENTARY,
        goal=Goal.LOSE_WEIGHT,
    )


@pytest.fixture
def complete_profile() -> UserProfile:
    return UserProfile(
        name="Sam",
        gender=Gender.MALE,
        age=30,
        height_cm=180,
        weight_kg=80,
        start_weight_kg=85,
        goal_weight_kg=75,
        activity_level=ActivityLevel.SEDENTARY,
        goal=Goal.LOSE_WEIGHT,
    )


@pytest.fixture
def food_entries() -> list[LoggedEntry]:
    return [
        LoggedEntry(
            name="Oatmeal with Berries",
            calories=280,
            meal_type=MealType.BREAKFAST,
            timestamp=_at(7),
        ),
        LoggedEntry(
            name="Greek Yogurt",
            calories=140,
            meal_type=MealType.BREAKFAST,
            timestamp=_at(8),
        ),
        LoggedEntry(
            name="Grilled Chicken Salad",
            calories=350,
            meal_type=MealType.LUNCH,
            timestamp=_at(12),
        ),
        LoggedEntry(
            name="Apple", calories=80, meal_type=MealType.SNACKS, timestamp=_at(15)
        ),
    ]


@pytest.fixture
def exercise_entries() -> list[LoggedEntry]:
    return [
        LoggedEntry(
            name="Running",
            kind=EntryKind.EXERCISE,
            calories=300,
            duration_minutes=30,
            category="Cardio",
            timestamp=_at(7),
        ),
        LoggedEntry(
            name="Yoga",
            kind=EntryKind.EXERCISE,
            calories=60,
            duration_minutes=20,
            category="Flexibility",
            timestamp=_at(18),
        ),
    ]


@pytest.fixture
def fake_store(complete_profile, food_entries, exercise_entries) -> FakeStore:
    users = [
        UserInDB(uid="u1", email="sam@example.com", profile=complete_profile),
        UserInDB(uid="u2", email="new@example.com"),
    ]
    entries = {
        ("u1", EntryKind.FOOD): food_entries,
        ("u1", EntryKind.EXERCISE): exercise_entries,
    }
    return FakeStore(users=users, entries=entries)
