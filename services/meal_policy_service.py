"""Meal policy service - per-meal category rules."""

from typing import Optional, Tuple

from domain.enums import Category, MealType
from domain.schemas.policy_schemas import (
    MealPolicyRecord,
    MealPolicyTable,
    SelectionConstraints,
)


class MealPolicy:
    """Read-only view over a MealPolicyTable."""

    def __init__(self, table: MealPolicyTable):
        self.table = table

    def record(self, meal_type: MealType) -> MealPolicyRecord:
        return self.table.record(meal_type)

    def is_allowed(self, category: Optional[Category], meal_type: MealType) -> bool:
        """category in allowed(meal) and not in blocked(meal)."""
        if category is None:
            return False
        row = self.record(meal_type)
        return category in row.allowed and category not in row.blocked

    def constraints(self, meal_type: MealType) -> SelectionConstraints:
        return self.record(meal_type).constraints

    def allowed_categories(self, meal_type: MealType) -> Tuple[Category, ...]:
        """Allowed categories in Category declaration order."""
        row = self.record(meal_type)
        return tuple(c for c in Category if c in row.allowed)

    def blocked_categories(self, meal_type: MealType) -> Tuple[Category, ...]:
        row = self.record(meal_type)
        return tuple(c for c in Category if c in row.blocked)
