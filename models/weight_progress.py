from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from utils.progress_tracker import progress_percentage, weight_change


class WeightProgress(BaseModel):
    start_weight: float
    current_weight: float
    goal_weight: float

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    @property
    def percentage(self) -> float:
        return progress_percentage(
            self.start_weight, self.current_weight, self.goal_weight
        )

    @property
    def change(self) -> float:
        return weight_change(self.start_weight, self.current_weight)
