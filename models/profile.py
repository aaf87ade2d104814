from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from utils.exceptions import InvalidMetrics


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class Goal(str, Enum):
    LOSE_WEIGHT = "lose_weight"
    MAINTAIN = "maintain"
    GAIN_WEIGHT = "gain_weight"


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class UserMetrics(BaseModel):
    """
    The inputs to a BMR/TDEE calculation. Supplied fresh by the caller for
    every calculation; values are type-coerced but not range-checked here.
    """

    gender: Gender
    age: int
    height_cm: float
    current_weight_kg: float
    activity_level: ActivityLevel = ActivityLevel.MODERATE
    goal: Goal = Goal.MAINTAIN

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class UserProfile(BaseModel):
    """Profile document as edited on the profile screen. All fields optional."""

    name: Optional[str] = None
    email: Optional[str] = None
    gender: Optional[Gender] = None
    age: Optional[int] = None
    height_cm: Optional[float] = Field(default=None, alias="heightCm")
    weight_kg: Optional[float] = Field(default=None, alias="weightKg")
    start_weight_kg: Optional[float] = Field(default=None, alias="startWeightKg")
    goal_weight_kg: Optional[float] = Field(default=None, alias="goalWeightKg")
    activity_level: Optional[ActivityLevel] = Field(default=None, alias="activityLevel")
    goal: Optional[Goal] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def is_complete(self) -> bool:
        """Gender is set and age, height and weight are positive."""
        if self.gender is None:
            return False
        return all(
            value is not None and value > 0
            for value in (self.age, self.height_cm, self.weight_kg)
        )

    def to_metrics(self) -> UserMetrics:
        if not self.is_complete():
            raise InvalidMetrics(
                "Profile needs gender, age, height and weight to calculate targets."
            )
        return UserMetrics(
            gender=self.gender,
            age=self.age,
            height_cm=self.height_cm,
            current_weight_kg=self.weight_kg,
            activity_level=self.activity_level or ActivityLevel.MODERATE,
            goal=self.goal or Goal.MAINTAIN,
        )
