"""Protocol service - single entry point over the compliance engine.

Catalog and policy are injected once; every call is a pure function of its
arguments plus those read-only tables, so one engine can serve concurrent
callers without coordination.
"""

import logging
from typing import Any, Optional, Tuple

from domain.enums import MealClassification, MealType
from domain.schemas.availability_schemas import AvailabilitySnapshot
from domain.schemas.catalog_schemas import AllowedIndexEntry, CanonicalIngredient, Catalog
from domain.schemas.policy_schemas import MealPolicyRecord, MealPolicyTable
from domain.schemas.recipe_schemas import (
    InferredSanitization,
    IngredientResolution,
    Recipe,
    SanitizationResult,
    ScreeningResult,
)
from services.availability_service import OptionAvailability
from services.classifier_service import MealClassifier
from services.compliance_service import ComplianceSanitizer, annotate, rebuild_recipe
from services.meal_policy_service import MealPolicy
from services.pairing_service import PairingAnalyzer
from services.resolver_service import IngredientResolver

logger = logging.getLogger("mealprotocol.engine")


class ProtocolEngine:
    """Wires resolver, policy, pairing, sanitizer, classifier and availability."""

    def __init__(self, catalog: Catalog, policy_table: MealPolicyTable):
        self.catalog = catalog
        self.policy = MealPolicy(policy_table)
        self.resolver = IngredientResolver(catalog)
        self.pairing = PairingAnalyzer(catalog)
        self.sanitizer = ComplianceSanitizer(self.resolver, self.policy, self.pairing)
        self.classifier = MealClassifier(self.resolver)
        self.availability = OptionAvailability(catalog, self.resolver, self.policy, self.pairing)
        logger.info(f"Protocol engine ready (catalog {catalog.version})")

    @property
    def catalog_version(self) -> str:
        return self.catalog.version

    def resolve(self, text: Any) -> IngredientResolution:
        return self.resolver.resolve(text)

    def is_allowed_ingredient(self, text: Any) -> bool:
        return self.resolver.is_allowed_ingredient(text)

    def sanitize(self, recipe: Any, meal_type: MealType) -> SanitizationResult:
        return self.sanitizer.sanitize(recipe, meal_type)

    def screen_ingredients(self, ingredients: Any) -> ScreeningResult:
        return self.sanitizer.screen_ingredients(ingredients)

    def classify(self, recipe: Any) -> MealClassification:
        return self.classifier.classify(recipe)

    def compute_options(self, meal_type: MealType, chosen_items: Any = None) -> AvailabilitySnapshot:
        return self.availability.compute_options(meal_type, chosen_items)

    def classify_and_sanitize(self, recipe: Any) -> InferredSanitization:
        """
        Infer the meal, then sanitize for it. When the meal cannot be inferred
        the recipe comes back unchanged with no removals; the caller decides
        whether to treat it as dinner or block it.
        """
        recipe = Recipe.coerce(recipe)
        classification = self.classify(recipe)
        meal_type = classification.meal_type
        if meal_type is None:
            untouched = tuple(
                annotate(line, self.resolve(line.display_text)) for line in recipe.ingredients
            )
            return InferredSanitization(
                classification=classification,
                cleaned_recipe=rebuild_recipe(recipe, untouched, None),
                removed=(),
            )
        result = self.sanitize(recipe, meal_type)
        return InferredSanitization(
            classification=classification,
            cleaned_recipe=result.cleaned_recipe,
            removed=result.removed,
        )

    def allowed_index(self) -> Tuple[AllowedIndexEntry, ...]:
        """Every protocol food with its category, sorted by name (case-insensitive)."""
        entries = [AllowedIndexEntry(name=i.name, category=i.category) for i in self.catalog.ingredients]
        entries.sort(key=lambda e: (e.name.casefold(), e.name))
        return tuple(entries)

    def ingredient(self, name: str) -> Optional[CanonicalIngredient]:
        return self.catalog.get(name)

    def meal_policy(self, meal_type: MealType) -> MealPolicyRecord:
        return self.policy.record(meal_type)
