from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FoodItem(BaseModel):
    """A food from the reference database, with calories per serving."""

    name: str
    calories: int = Field(..., ge=0)
    serving: str

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


DEFAULT_FOOD_DATABASE = (
    FoodItem(name="Banana", calories=105, serving="1 medium"),
    FoodItem(name="Chicken Breast", calories=165, serving="3.5 oz"),
    FoodItem(name="Brown Rice", calories=112, serving="1/2 cup cooked"),
    FoodItem(name="Avocado", calories=234, serving="1 whole"),
    FoodItem(name="Eggs", calories=70, serving="1 large"),
    FoodItem(name="Sweet Potato", calories=112, serving="1 medium"),
    FoodItem(name="Spinach", calories=7, serving="1 cup"),
    FoodItem(name="Quinoa", calories=111, serving="1/2 cup cooked"),
)
