"""Compliance service - strips protocol-violating ingredients from a recipe.

Sanitization is a two-stage pipeline:

1. per-item filter: every line must resolve to a known ingredient whose
   category the meal policy allows
2. breakfast only: fruit pairing filter over the survivors of stage 1

Each stage returns an immutable StageResult; removals are concatenated in
stage order, so per-item rejections always precede pairing removals.
"""

import logging
from dataclasses import dataclass
from typing import Any, FrozenSet, Iterable, List, Tuple

from domain.enums import FruitGroup, MealType, RemovalReason, ViolationType
from domain.schemas.pairing_schemas import PairingAnalysis
from domain.schemas.recipe_schemas import (
    IngredientLine,
    IngredientResolution,
    Recipe,
    RemovalRecord,
    SanitizationResult,
    SanitizedIngredient,
    SanitizedRecipe,
    ScreeningResult,
)
from services.meal_policy_service import MealPolicy
from services.pairing_service import PairingAnalyzer
from services.resolver_service import IngredientResolver

logger = logging.getLogger("mealprotocol.compliance")

UNKNOWN_MESSAGE = "unknown ingredient"
DISALLOWED_MESSAGE = "explicitly disallowed"
PAIRING_MESSAGE = "breakfast fruit pairing rule violation"


@dataclass(frozen=True)
class StageResult:
    kept: Tuple[SanitizedIngredient, ...]
    removed: Tuple[RemovalRecord, ...]


def annotate(line: IngredientLine, resolution: IngredientResolution) -> SanitizedIngredient:
    """Attach the resolution to a line without touching its text."""
    return SanitizedIngredient(
        amount=line.amount,
        item=line.item,
        raw=line.raw,
        canonical_name=resolution.canonical_name,
        category=resolution.category,
    )


def pairing_keep_set(analysis: PairingAnalysis, analyzer: PairingAnalyzer) -> FrozenSet[str]:
    """
    Deterministic auto-remove policy for breakfast fruit.

    - melon mixed with others: keep only melons
    - sweet with acid: look at the first fruit in ingredient order;
      sweet first -> drop acid, acid first -> drop sweet,
      subacid first -> keep subacid fruit plus that first fruit
    """
    fruits = analysis.fruits
    if analysis.ok:
        return frozenset(fruits)

    if analysis.has(ViolationType.MELON_MUST_BE_SOLO):
        melons = analyzer.members(FruitGroup.MELON)
        return frozenset(f for f in fruits if f in melons)

    sweet = analyzer.members(FruitGroup.SWEET)
    acid = analyzer.members(FruitGroup.ACID)
    first = fruits[0]
    if first in sweet:
        return frozenset(f for f in fruits if f not in acid)
    if first in acid:
        return frozenset(f for f in fruits if f not in sweet)
    subacid = analyzer.members(FruitGroup.SUBACID)
    return frozenset(f for f in fruits if f in subacid or f == first)


class ComplianceSanitizer:
    """Filters recipes against the catalog, the meal policy and fruit pairing."""

    def __init__(
        self,
        resolver: IngredientResolver,
        policy: MealPolicy,
        pairing: PairingAnalyzer,
    ):
        self.resolver = resolver
        self.policy = policy
        self.pairing = pairing

    def sanitize(self, recipe: Any, meal_type: MealType) -> SanitizationResult:
        """
        Return a sanitized copy of recipe for meal_type plus a removal audit.
        The input is never mutated; malformed input is treated as empty.
        """
        meal_type = MealType(meal_type)
        recipe = Recipe.coerce(recipe)

        per_item = self._filter_by_policy(recipe.ingredients, meal_type)
        if meal_type is MealType.BREAKFAST:
            paired = self._filter_by_pairing(per_item.kept)
        else:
            paired = StageResult(kept=per_item.kept, removed=())

        removed = per_item.removed + paired.removed
        logger.info(
            f"Sanitized recipe {recipe.id or recipe.title or '<untitled>'} for "
            f"{meal_type.value}: kept {len(paired.kept)}, removed {len(removed)}"
        )
        return SanitizationResult(
            meal_type=meal_type,
            cleaned_recipe=rebuild_recipe(recipe, paired.kept, meal_type),
            removed=removed,
        )

    def screen_ingredients(self, ingredients: Any) -> ScreeningResult:
        """Meal-agnostic filter: keep only lines that resolve to protocol foods."""
        if not isinstance(ingredients, (list, tuple)):
            ingredients = ()
        kept: List[SanitizedIngredient] = []
        removed: List[RemovalRecord] = []
        for value in ingredients:
            line = IngredientLine.coerce(value)
            resolution = self.resolver.resolve(line.display_text)
            if resolution.is_known:
                kept.append(annotate(line, resolution))
            else:
                removed.append(self._catalog_rejection(line, resolution))
        return ScreeningResult(ingredients=tuple(kept), removed=tuple(removed))

    # ------------------ stages ------------------
    def _filter_by_policy(
        self, lines: Iterable[IngredientLine], meal_type: MealType
    ) -> StageResult:
        kept: List[SanitizedIngredient] = []
        removed: List[RemovalRecord] = []
        for line in lines:
            resolution = self.resolver.resolve(line.display_text)
            if not resolution.is_known:
                removed.append(self._catalog_rejection(line, resolution))
                continue
            if not self.policy.is_allowed(resolution.category, meal_type):
                logger.debug(
                    f"Removing '{line.display_text}' ({resolution.category.value}) "
                    f"from {meal_type.value}"
                )
                removed.append(
                    RemovalRecord(
                        original_text=line.display_text,
                        resolved_name=resolution.canonical_name,
                        reason_code=RemovalReason.NOT_ALLOWED_FOR_MEAL,
                        reason_message=(
                            f"not allowed for {meal_type.value} ({resolution.category.value})"
                        ),
                    )
                )
                continue
            kept.append(annotate(line, resolution))
        return StageResult(kept=tuple(kept), removed=tuple(removed))

    def _filter_by_pairing(self, items: Tuple[SanitizedIngredient, ...]) -> StageResult:
        analysis = self.pairing.analyze(i.canonical_name for i in items if i.canonical_name)
        if analysis.ok:
            return StageResult(kept=items, removed=())

        keep = pairing_keep_set(analysis, self.pairing)
        cause = (
            ViolationType.MELON_MUST_BE_SOLO
            if analysis.has(ViolationType.MELON_MUST_BE_SOLO)
            else ViolationType.SWEET_WITH_ACID_FORBIDDEN
        )
        kept: List[SanitizedIngredient] = []
        removed: List[RemovalRecord] = []
        for item in items:
            is_fruit = self.pairing.group_of(item.canonical_name or "") is not None
            if not is_fruit or item.canonical_name in keep:
                kept.append(item)
                continue
            removed.append(
                RemovalRecord(
                    original_text=item.display_text,
                    resolved_name=item.canonical_name,
                    reason_code=RemovalReason.FRUIT_PAIRING_VIOLATION,
                    reason_message=f"{PAIRING_MESSAGE} ({cause.value})",
                )
            )
        logger.info(f"Fruit pairing auto-removed {len(removed)} item(s) ({cause.value})")
        return StageResult(kept=tuple(kept), removed=tuple(removed))

    @staticmethod
    def _catalog_rejection(line: IngredientLine, resolution: IngredientResolution) -> RemovalRecord:
        if resolution.is_disallowed:
            return RemovalRecord(
                original_text=line.display_text,
                resolved_name=None,
                reason_code=RemovalReason.EXPLICITLY_DISALLOWED,
                reason_message=DISALLOWED_MESSAGE,
            )
        return RemovalRecord(
            original_text=line.display_text,
            resolved_name=None,
            reason_code=RemovalReason.UNKNOWN_INGREDIENT,
            reason_message=UNKNOWN_MESSAGE,
        )


def rebuild_recipe(recipe: Recipe, ingredients, meal_type) -> SanitizedRecipe:
    """Copy recipe (extra keys included) with a new ingredient list."""
    data = recipe.model_dump(exclude={"ingredients"})
    data["ingredients"] = tuple(ingredients)
    data["meal_type"] = meal_type
    return SanitizedRecipe.model_validate(data)
