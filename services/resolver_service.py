"""Resolver service - maps free ingredient text onto the protocol catalog."""

import logging
from typing import Any, Dict, List, Optional, Tuple

from core.utils.helpers import coerce_text, contains_token
from domain.enums import Category, MatchKind, ResolutionStatus
from domain.schemas.catalog_schemas import CanonicalIngredient, Catalog
from domain.schemas.recipe_schemas import IngredientResolution

logger = logging.getLogger("mealprotocol.resolver")


class IngredientResolver:
    """
    Resolve ingredient text to a canonical ingredient.

    Lookup order, first hit wins:
    1. empty text -> unknown
    2. exact alias (may hit an explicitly disallowed alias)
    3. exact canonical name
    4. whole-token "contains" match against canonical names; longest wins,
       equal lengths fall back to catalog.tie_break_order
    5. unknown
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog
        self._by_key: Dict[str, CanonicalIngredient] = {}
        self._alias_to_name: Dict[str, str] = {}
        self._disallowed_keys = frozenset(
            catalog.key_for(alias) for alias in catalog.disallowed_aliases
        )
        for ing in catalog.ingredients:
            self._by_key[catalog.key_for(ing.name)] = ing
            for alias in ing.aliases:
                self._alias_to_name[catalog.key_for(alias)] = ing.name

        by_name = {ing.name: ing for ing in catalog.ingredients}
        # (key, ingredient) in tie-break order; scanned by the contains step
        self._contains_order: List[Tuple[str, CanonicalIngredient]] = [
            (catalog.key_for(name), by_name[name]) for name in catalog.tie_break_order
        ]

    def resolve(self, text: Any) -> IngredientResolution:
        source = coerce_text(text)
        key = self.catalog.key_for(source)
        if not key:
            return IngredientResolution(source_text=source, normalized="")

        if key in self._disallowed_keys:
            logger.debug(f"'{source}' is explicitly disallowed")
            return IngredientResolution(
                source_text=source,
                normalized=key,
                status=ResolutionStatus.EXPLICITLY_DISALLOWED,
                match=MatchKind.ALIAS,
            )

        alias_target = self._alias_to_name.get(key)
        if alias_target is not None:
            ing = self._by_key[self.catalog.key_for(alias_target)]
            return self._known(source, key, ing, MatchKind.ALIAS)

        ing = self._by_key.get(key)
        if ing is not None:
            return self._known(source, key, ing, MatchKind.CANONICAL)

        ing = self._longest_contained(key)
        if ing is not None:
            return self._known(source, key, ing, MatchKind.CONTAINS)

        logger.debug(f"'{source}' did not resolve to any catalog ingredient")
        return IngredientResolution(source_text=source, normalized=key)

    def _longest_contained(self, key: str) -> Optional[CanonicalIngredient]:
        best: Optional[CanonicalIngredient] = None
        best_len = -1
        # strict ">" keeps the earliest entry of the tie-break order on ties
        for ckey, ing in self._contains_order:
            if len(ckey) > best_len and contains_token(key, ckey):
                best, best_len = ing, len(ckey)
        return best

    @staticmethod
    def _known(
        source: str, key: str, ing: CanonicalIngredient, match: MatchKind
    ) -> IngredientResolution:
        return IngredientResolution(
            source_text=source,
            normalized=key,
            canonical_name=ing.name,
            category=ing.category,
            status=ResolutionStatus.KNOWN,
            match=match,
        )

    def is_allowed_ingredient(self, text: Any) -> bool:
        """True when text resolves to a protocol food (for any meal)."""
        return self.resolve(text).is_known

    def category_of(self, name: str) -> Optional[Category]:
        ing = self._by_key.get(self.catalog.key_for(name))
        return ing.category if ing is not None else None
