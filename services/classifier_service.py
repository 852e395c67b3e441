"""Classifier service - infers the meal a recipe belongs to."""

import logging
from typing import Any, Set

from domain.enums import (
    FRUIT_CATEGORIES,
    LUNCH_BLOCKED_EXTRAS,
    PROTEIN_CATEGORIES,
    Category,
    MealClassification,
)
from domain.schemas.recipe_schemas import Recipe
from services.resolver_service import IngredientResolver

logger = logging.getLogger("mealprotocol.classifier")


class MealClassifier:
    """
    Rule order is fixed, first match wins:

    1. fruit/melon, no complex carb, no protein, no oil/vinegar/condiment/sweetener -> breakfast
    2. complex carb, no protein, no oil/vinegar/condiment/sweetener -> lunch
    3. any protein -> dinner
    4. otherwise -> unknown
    """

    def __init__(self, resolver: IngredientResolver):
        self.resolver = resolver

    def categories_of(self, recipe: Any) -> Set[Category]:
        """Categories of every resolvable ingredient line; unknown lines are ignored."""
        recipe = Recipe.coerce(recipe)
        categories: Set[Category] = set()
        for line in recipe.ingredients:
            resolution = self.resolver.resolve(line.display_text)
            if resolution.is_known:
                categories.add(resolution.category)
        return categories

    def classify(self, recipe: Any) -> MealClassification:
        categories = self.categories_of(recipe)

        has_fruit = bool(categories & FRUIT_CATEGORIES)
        has_complex_carb = Category.COMPLEX_CARB in categories
        has_protein = bool(categories & PROTEIN_CATEGORIES)
        has_lunch_blocked = bool(categories & LUNCH_BLOCKED_EXTRAS)

        if has_fruit and not has_complex_carb and not has_protein and not has_lunch_blocked:
            result = MealClassification.BREAKFAST
        elif has_complex_carb and not has_protein and not has_lunch_blocked:
            result = MealClassification.LUNCH
        elif has_protein:
            result = MealClassification.DINNER
        else:
            result = MealClassification.UNKNOWN

        logger.debug(f"Classified recipe with {sorted(c.value for c in categories)} as {result.value}")
        return result
