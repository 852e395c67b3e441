"""Availability service - narrows meal-building choices as items are picked.

Choosing quinoa for lunch makes the other complex carbs unavailable,
choosing one protein for dinner disables every other protein, and at
breakfast a melon disables all other fruit while sweet and acid fruit
exclude each other.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Tuple

from domain.enums import Category, FruitGroup, MealType
from domain.schemas.availability_schemas import AvailabilitySnapshot
from domain.schemas.catalog_schemas import Catalog
from services.meal_policy_service import MealPolicy
from services.pairing_service import PairingAnalyzer
from services.resolver_service import IngredientResolver

logger = logging.getLogger("mealprotocol.availability")


class OptionAvailability:
    def __init__(
        self,
        catalog: Catalog,
        resolver: IngredientResolver,
        policy: MealPolicy,
        pairing: PairingAnalyzer,
    ):
        self.catalog = catalog
        self.resolver = resolver
        self.policy = policy
        self.pairing = pairing

    def resolve_choices(self, chosen_items: Any) -> Tuple[str, ...]:
        """
        Best-effort resolution of chosen items: canonical name when known,
        normalized text otherwise. Empty entries are dropped.

        Accepts a list of items or a selections mapping holding one under
        "chosenItems" or "chosen_items".
        """
        if isinstance(chosen_items, Mapping):
            chosen_items = chosen_items.get("chosenItems", chosen_items.get("chosen_items"))
        if not isinstance(chosen_items, (list, tuple)):
            return ()
        resolved: List[str] = []
        for item in chosen_items:
            resolution = self.resolver.resolve(item)
            name = resolution.canonical_name if resolution.is_known else resolution.normalized
            if name:
                resolved.append(name)
        return tuple(resolved)

    def compute_options(self, meal_type: MealType, chosen_items: Any = None) -> AvailabilitySnapshot:
        meal_type = MealType(meal_type)
        chosen = self.resolve_choices(chosen_items)
        allowed = self.policy.allowed_categories(meal_type)
        blocked = self.policy.blocked_categories(meal_type)
        constraints = self.policy.constraints(meal_type)

        options: Dict[Category, Tuple[str, ...]] = {
            category: self.catalog.names_in(category) for category in allowed
        }

        if meal_type is MealType.LUNCH:
            chosen_carbs = self._chosen_in(chosen, (Category.COMPLEX_CARB,))
            if len(chosen_carbs) >= constraints.max_complex_carb_choices:
                self._restrict(options, (Category.COMPLEX_CARB,), chosen_carbs)

        elif meal_type is MealType.DINNER:
            proteins = (Category.BEAN_LEGUME, Category.NUT_SEED)
            chosen_proteins = self._chosen_in(chosen, proteins)
            if len(chosen_proteins) >= constraints.max_protein_choices:
                self._restrict(options, proteins, chosen_proteins)

        elif meal_type is MealType.BREAKFAST:
            groups = {self.pairing.group_of(name) for name in chosen}
            if FruitGroup.MELON in groups:
                melons = self.pairing.members(FruitGroup.MELON)
                if Category.MELON in options:
                    options[Category.MELON] = tuple(
                        n for n in options[Category.MELON] if n in melons
                    )
                for category in (
                    Category.FRUIT_SWEET,
                    Category.FRUIT_SUBACID,
                    Category.FRUIT_ACID,
                ):
                    options[category] = ()
            else:
                if FruitGroup.SWEET in groups:
                    options[Category.FRUIT_ACID] = ()
                if FruitGroup.ACID in groups:
                    options[Category.FRUIT_SWEET] = ()

        for category in blocked:
            options.pop(category, None)

        sizes = {c.value: len(v) for c, v in options.items()}
        logger.debug(f"Options for {meal_type.value} after choosing {list(chosen)}: {sizes}")
        return AvailabilitySnapshot(
            meal_type=meal_type,
            allowed_categories=allowed,
            blocked_categories=blocked,
            allowed_items_by_category=options,
            chosen_resolved=chosen,
        )

    def _chosen_in(self, chosen: Iterable[str], categories: Tuple[Category, ...]) -> List[str]:
        return [name for name in chosen if self.resolver.category_of(name) in categories]

    @staticmethod
    def _restrict(
        options: Dict[Category, Tuple[str, ...]],
        categories: Tuple[Category, ...],
        keep: Iterable[str],
    ) -> None:
        keep = set(keep)
        for category in categories:
            options[category] = tuple(n for n in options.get(category, ()) if n in keep)
