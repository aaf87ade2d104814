import enum
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel


class EntryKind(str, enum.Enum):
    """Which log an entry belongs to."""

    FOOD = "food"
    EXERCISE = "exercise"


class MealType(str, enum.Enum):
    """Meal sections of the food diary, in display order."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACKS = "snacks"


class Intensity(str, enum.Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LoggedEntry(BaseModel):
    """
    A single food or exercise log row. Owned by the store; the metrics code
    only reads these.
    """

    id: Optional[str] = None
    name: str
    kind: EntryKind = EntryKind.FOOD
    calories: int = Field(default=0, ge=0)
    duration_minutes: int = Field(default=0, ge=0)
    meal_type: Optional[MealType] = None
    category: Optional[str] = None
    intensity: Optional[Intensity] = None
    serving: Optional[str] = None
    timestamp: datetime = Field(default_factory=_utc_now)

    @field_serializer("kind", "meal_type", "intensity")
    def serialize_enum(self, value: Optional[enum.Enum], _info):
        """Stores enums as their plain string values."""
        return value.value if value is not None else None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
