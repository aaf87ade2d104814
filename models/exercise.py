from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ExerciseCatalogEntry(BaseModel):
    """A reference activity with its average calorie burn rate."""

    name: str
    category: str
    calories_per_minute: float = Field(..., gt=0, alias="caloriesPerMinute")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


DEFAULT_EXERCISES = (
    ExerciseCatalogEntry(name="Running", category="Cardio", calories_per_minute=10),
    ExerciseCatalogEntry(name="Cycling", category="Cardio", calories_per_minute=8),
    ExerciseCatalogEntry(name="Swimming", category="Cardio", calories_per_minute=12),
    ExerciseCatalogEntry(
        name="Weight Training", category="Strength", calories_per_minute=6
    ),
    ExerciseCatalogEntry(name="Yoga", category="Flexibility", calories_per_minute=3),
    ExerciseCatalogEntry(name="Walking", category="Cardio", calories_per_minute=4),
    ExerciseCatalogEntry(name="HIIT", category="Cardio", calories_per_minute=15),
    ExerciseCatalogEntry(name="Pilates", category="Strength", calories_per_minute=4),
)
