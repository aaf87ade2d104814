from datetime import datetime
from typing import Iterable, List, Optional

from models.entry import EntryKind, LoggedEntry, MealType
from models.food import FoodItem


def search_foods(database: Iterable[FoodItem], term: str) -> List[FoodItem]:
    """Case-insensitive substring match on food names, in database order."""
    needle = (term or "").strip().lower()
    return [food for food in database if needle in food.name.lower()]


def build_food_entry(
    item: FoodItem, meal_type: MealType, timestamp: Optional[datetime] = None
) -> LoggedEntry:
    fields = dict(
        name=item.name,
        kind=EntryKind.FOOD,
        calories=item.calories,
        meal_type=MealType(meal_type),
        serving=item.serving,
    )
    if timestamp is not None:
        fields["timestamp"] = timestamp
    return LoggedEntry(**fields)
