"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.catalog_schemas import (
    AllowedIndexEntry,
    CanonicalIngredient,
    Catalog,
)
from domain.schemas.policy_schemas import (
    MealPolicyRecord,
    MealPolicyTable,
    SelectionConstraints,
)
from domain.schemas.recipe_schemas import (
    IngredientLine,
    IngredientResolution,
    InferredSanitization,
    Recipe,
    RemovalRecord,
    SanitizationResult,
    SanitizedIngredient,
    SanitizedRecipe,
    ScreeningResult,
)
from domain.schemas.pairing_schemas import PairingAnalysis, PairingViolation
from domain.schemas.availability_schemas import AvailabilitySnapshot

__all__ = [
    # Catalog schemas
    "AllowedIndexEntry",
    "CanonicalIngredient",
    "Catalog",
    # Policy schemas
    "MealPolicyRecord",
    "MealPolicyTable",
    "SelectionConstraints",
    # Recipe schemas
    "IngredientLine",
    "IngredientResolution",
    "InferredSanitization",
    "Recipe",
    "RemovalRecord",
    "SanitizationResult",
    "SanitizedIngredient",
    "SanitizedRecipe",
    "ScreeningResult",
    # Pairing / availability
    "PairingAnalysis",
    "PairingViolation",
    "AvailabilitySnapshot",
]
