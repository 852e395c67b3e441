"""Schemas for meal-building option availability."""

from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict

from domain.enums import Category, MealType


class AvailabilitySnapshot(BaseModel):
    """Catalog items still selectable for a meal, grouped by category."""

    model_config = ConfigDict(frozen=True)

    meal_type: MealType
    allowed_categories: Tuple[Category, ...]
    blocked_categories: Tuple[Category, ...]
    allowed_items_by_category: Dict[Category, Tuple[str, ...]]
    chosen_resolved: Tuple[str, ...] = ()

    def items_for(self, category: Category) -> Tuple[str, ...]:
        return self.allowed_items_by_category.get(category, ())
