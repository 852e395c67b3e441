"""Pydantic schemas for the protocol ingredient catalog."""

from typing import Dict, FrozenSet, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from core.utils.helpers import normalize
from domain.enums import Category


class CanonicalIngredient(BaseModel):
    """One protocol food and every text variant that resolves to it."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Display name")
    category: Category
    aliases: FrozenSet[str] = frozenset()


class Catalog(BaseModel):
    """
    Versioned, read-only registry of canonical ingredients.

    `priority` is the explicit tie-break order used when two canonical names
    of equal length both match inside a longer ingredient line. When empty,
    declaration order of `ingredients` is used.
    """

    model_config = ConfigDict(frozen=True)

    version: str = Field(..., min_length=1)
    keep_digits: bool = Field(
        default=True, description="Normalizer variant: retain digits in keys"
    )
    ingredients: Tuple[CanonicalIngredient, ...]
    disallowed_aliases: FrozenSet[str] = frozenset()
    priority: Tuple[str, ...] = ()

    @model_validator(mode="after")
    def check_consistency(self) -> "Catalog":
        owner_by_key: Dict[str, str] = {}
        for ing in self.ingredients:
            key = self.key_for(ing.name)
            if not key:
                raise ValueError(f"canonical name {ing.name!r} normalizes to empty")
            if key in owner_by_key:
                raise ValueError(
                    f"duplicate canonical ingredient {ing.name!r} "
                    f"(collides with {owner_by_key[key]!r})"
                )
            owner_by_key[key] = ing.name

        alias_owner: Dict[str, str] = {}
        for ing in self.ingredients:
            for alias in ing.aliases:
                akey = self.key_for(alias)
                if not akey:
                    raise ValueError(f"alias {alias!r} of {ing.name!r} normalizes to empty")
                canonical_owner = owner_by_key.get(akey)
                if canonical_owner is not None and canonical_owner != ing.name:
                    raise ValueError(
                        f"alias {alias!r} of {ing.name!r} shadows canonical {canonical_owner!r}"
                    )
                previous = alias_owner.get(akey)
                if previous is not None and previous != ing.name:
                    raise ValueError(
                        f"alias {alias!r} maps to both {previous!r} and {ing.name!r}"
                    )
                alias_owner[akey] = ing.name

        for alias in self.disallowed_aliases:
            akey = self.key_for(alias)
            if not akey:
                raise ValueError(f"disallowed alias {alias!r} normalizes to empty")
            if akey in owner_by_key or akey in alias_owner:
                raise ValueError(f"disallowed alias {alias!r} is also an allowed name")

        if self.priority:
            names = [ing.name for ing in self.ingredients]
            if len(set(self.priority)) != len(self.priority) or set(self.priority) != set(names):
                raise ValueError(
                    "priority must list every canonical ingredient name exactly once"
                )
        return self

    def key_for(self, text: str) -> str:
        """Normalize text with this catalog's normalizer variant."""
        return normalize(text, keep_digits=self.keep_digits)

    @property
    def tie_break_order(self) -> Tuple[str, ...]:
        if self.priority:
            return self.priority
        return tuple(ing.name for ing in self.ingredients)

    def get(self, name: str) -> Optional[CanonicalIngredient]:
        """Look up a canonical ingredient by (normalized) name."""
        key = self.key_for(name)
        for ing in self.ingredients:
            if self.key_for(ing.name) == key:
                return ing
        return None

    def names_in(self, category: Category) -> Tuple[str, ...]:
        """Canonical names of a category, in declaration order."""
        return tuple(ing.name for ing in self.ingredients if ing.category == category)


class AllowedIndexEntry(BaseModel):
    """Row of the "allowed foods" reference listing."""

    model_config = ConfigDict(frozen=True)

    name: str
    category: Category
