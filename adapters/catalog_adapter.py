"""Catalog adapter - builds the protocol Catalog and MealPolicyTable.

The engine never reads configuration itself; this adapter is the only place
that turns static data or a JSON document into validated, frozen values.

JSON document layout:

    {
      "version": "2025-12-22",
      "keep_digits": true,
      "ingredients": {"fruit-sweet": ["Mango", ...], ...},
      "aliases": {"apple": "Apples", "apple cider vinegar": null, ...},
      "priority": ["Chickpeas", ...],            # optional
      "meal_policy": {                           # optional
        "breakfast": {"allowed": [...], "blocked": [...], "constraints": {...}},
        ...
      }
    }
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from app.exceptions import CatalogConfigurationError
from domain.data.meal_policy import MEAL_POLICY_ROWS
from domain.data.protocol_foods import (
    ALIASES,
    DISALLOWED_ALIASES,
    FOODS_BY_CATEGORY,
    PROTOCOL_FOODS_VERSION,
    TIE_BREAK_CATEGORY_ORDER,
)
from domain.enums import Category, MealType
from domain.schemas.catalog_schemas import CanonicalIngredient, Catalog
from domain.schemas.policy_schemas import MealPolicyTable

logger = logging.getLogger("mealprotocol.catalog")


# ------------------ Builders ------------------
def build_catalog(
    version: str,
    foods_by_category: Mapping[Any, Iterable[str]],
    aliases: Optional[Mapping[str, Optional[str]]] = None,
    priority: Optional[Iterable[str]] = None,
    keep_digits: bool = True,
) -> Catalog:
    """
    Assemble a Catalog from category lists and an alias map.

    An alias mapped to None marks a recognized but explicitly disallowed food.

    Raises:
        CatalogConfigurationError: if the data is inconsistent
    """
    aliases = aliases or {}
    known_names = {name for names in foods_by_category.values() for name in names}

    alias_sets: Dict[str, List[str]] = {}
    disallowed: List[str] = []
    for alias, canonical in aliases.items():
        if canonical is None:
            disallowed.append(alias)
        elif canonical not in known_names:
            raise CatalogConfigurationError(
                f"Alias {alias!r} points at unknown ingredient {canonical!r}",
                details={"alias": alias, "canonical": canonical},
                code="UNKNOWN_ALIAS_TARGET",
            )
        else:
            alias_sets.setdefault(canonical, []).append(alias)

    try:
        ingredients = [
            CanonicalIngredient(
                name=name,
                category=Category(category),
                aliases=frozenset(alias_sets.get(name, ())),
            )
            for category, names in foods_by_category.items()
            for name in names
        ]
        catalog = Catalog(
            version=version,
            keep_digits=keep_digits,
            ingredients=tuple(ingredients),
            disallowed_aliases=frozenset(disallowed),
            priority=tuple(priority or ()),
        )
    except (ValidationError, ValueError) as exc:
        raise CatalogConfigurationError(
            f"Invalid catalog {version!r}: {exc}", code="INVALID_CATALOG"
        ) from exc

    logger.info(
        f"Built catalog {catalog.version}: {len(catalog.ingredients)} ingredients, "
        f"{len(disallowed)} disallowed aliases"
    )
    return catalog


def build_policy(rows: Mapping[Any, Mapping[str, Any]]) -> MealPolicyTable:
    """
    Assemble a MealPolicyTable from per-meal rows of
    {"allowed": [...], "blocked": [...], "constraints": {...}}.

    Raises:
        CatalogConfigurationError: if a row is missing or inconsistent
    """
    try:
        data = {}
        for meal_type in MealType:
            row = rows.get(meal_type, rows.get(meal_type.value))
            if row is None:
                raise CatalogConfigurationError(
                    f"Meal policy has no row for {meal_type.value}",
                    code="MISSING_POLICY_ROW",
                )
            data[meal_type.value] = {
                "meal_type": meal_type,
                "allowed": frozenset(Category(c) for c in row.get("allowed", ())),
                "blocked": frozenset(Category(c) for c in row.get("blocked", ())),
                "constraints": dict(row.get("constraints") or {}),
            }
        return MealPolicyTable.model_validate(data)
    except (ValidationError, ValueError) as exc:
        raise CatalogConfigurationError(
            f"Invalid meal policy: {exc}", code="INVALID_MEAL_POLICY"
        ) from exc


def default_priority() -> Tuple[str, ...]:
    """Tie-break order of the built-in catalog."""
    return tuple(
        name
        for category in TIE_BREAK_CATEGORY_ORDER
        for name in FOODS_BY_CATEGORY[category]
    )


def load_default_catalog() -> Catalog:
    aliases: Dict[str, Optional[str]] = dict(ALIASES)
    aliases.update({alias: None for alias in DISALLOWED_ALIASES})
    return build_catalog(
        PROTOCOL_FOODS_VERSION,
        FOODS_BY_CATEGORY,
        aliases=aliases,
        priority=default_priority(),
    )


def load_default_policy() -> MealPolicyTable:
    return build_policy(MEAL_POLICY_ROWS)


# ------------------ JSON files ------------------
def _read_json(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as exc:
        raise CatalogConfigurationError(
            f"Catalog file not found: {path}", code="CATALOG_NOT_FOUND"
        ) from exc
    except json.JSONDecodeError as exc:
        raise CatalogConfigurationError(
            f"Catalog file is not valid JSON: {path}: {exc}", code="CATALOG_NOT_JSON"
        ) from exc
    if not isinstance(data, dict):
        raise CatalogConfigurationError(
            f"Catalog file must hold a JSON object: {path}", code="CATALOG_NOT_OBJECT"
        )
    return data


def load_catalog_file(
    path: Union[str, Path],
) -> Tuple[Catalog, MealPolicyTable]:
    """
    Load a catalog (and optionally a meal policy) from a JSON file.
    Without a "meal_policy" section the built-in policy is used.
    """
    path = Path(path)
    logger.info(f"Loading catalog from {path}")
    data = _read_json(path)

    ingredients = data.get("ingredients")
    if not isinstance(ingredients, dict) or not ingredients:
        raise CatalogConfigurationError(
            "Catalog file needs a non-empty 'ingredients' object",
            code="CATALOG_NO_INGREDIENTS",
        )
    for category, names in ingredients.items():
        if not isinstance(names, list):
            raise CatalogConfigurationError(
                f"Ingredients of {category!r} must be a JSON list",
                details={"category": category},
                code="CATALOG_BAD_CATEGORY_LIST",
            )

    catalog = build_catalog(
        version=str(data.get("version") or path.stem),
        foods_by_category=ingredients,
        aliases=data.get("aliases") or {},
        priority=data.get("priority") or (),
        keep_digits=bool(data.get("keep_digits", True)),
    )
    policy_rows = data.get("meal_policy")
    policy = build_policy(policy_rows) if policy_rows else load_default_policy()
    return catalog, policy


def load_protocol_config(catalog_path: Optional[str] = None) -> Tuple[Catalog, MealPolicyTable]:
    """Built-in catalog and policy, or the ones from catalog_path when set."""
    if catalog_path:
        return load_catalog_file(catalog_path)
    return load_default_catalog(), load_default_policy()
