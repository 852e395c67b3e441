"""Pydantic schemas for per-meal category policy."""

from typing import FrozenSet

from pydantic import BaseModel, ConfigDict, Field, model_validator

from domain.enums import Category, MealType


class SelectionConstraints(BaseModel):
    """Limits applied while a user builds a meal."""

    model_config = ConfigDict(frozen=True)

    max_complex_carb_choices: int = Field(default=1, ge=1)
    max_protein_choices: int = Field(default=1, ge=1)
    single_melon_only: bool = False


class MealPolicyRecord(BaseModel):
    """
    Allowed / blocked categories of one meal.

    `allowed` is the operative whitelist. `blocked` must be disjoint from it,
    and together they must cover every Category so that adding a category
    forces an explicit decision for each meal.
    """

    model_config = ConfigDict(frozen=True)

    meal_type: MealType
    allowed: FrozenSet[Category]
    blocked: FrozenSet[Category] = frozenset()
    constraints: SelectionConstraints = Field(default_factory=SelectionConstraints)

    @model_validator(mode="after")
    def check_categories(self) -> "MealPolicyRecord":
        overlap = self.allowed & self.blocked
        if overlap:
            names = ", ".join(sorted(c.value for c in overlap))
            raise ValueError(f"{self.meal_type.value}: categories both allowed and blocked: {names}")
        undecided = set(Category) - self.allowed - self.blocked
        if undecided:
            names = ", ".join(sorted(c.value for c in undecided))
            raise ValueError(f"{self.meal_type.value}: no allow/block decision for: {names}")
        return self


class MealPolicyTable(BaseModel):
    """One policy record per meal type."""

    model_config = ConfigDict(frozen=True)

    breakfast: MealPolicyRecord
    lunch: MealPolicyRecord
    dinner: MealPolicyRecord

    @model_validator(mode="after")
    def check_rows(self) -> "MealPolicyTable":
        for meal_type in MealType:
            if self.record(meal_type).meal_type is not meal_type:
                raise ValueError(f"policy row {meal_type.value!r} describes another meal")
        return self

    def record(self, meal_type: MealType) -> MealPolicyRecord:
        return getattr(self, MealType(meal_type).value)
