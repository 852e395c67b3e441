"""
Domain enums for MealProtocol.
Contains all enumeration types used across the protocol engine.
"""

import enum
from typing import Optional


class Category(str, enum.Enum):
    """Food group used to decide meal eligibility"""

    FRUIT_SWEET = "fruit-sweet"
    FRUIT_SUBACID = "fruit-subacid"
    FRUIT_ACID = "fruit-acid"
    MELON = "melon"
    LEAFY_GREEN = "leafy-green"
    VEGETABLE = "vegetable"
    SPROUT = "sprout"
    SEAWEED = "seaweed"
    COMPLEX_CARB = "complex-carb"
    BEAN_LEGUME = "bean-legume"
    NUT_SEED = "nut-seed"
    OIL = "oil"
    VINEGAR = "vinegar"
    CONDIMENT = "condiment"
    SWEETENER = "sweetener"
    HERB_SPICE = "herb-spice"


class MealType(str, enum.Enum):
    """Meal slots of the protocol day"""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"


class MealClassification(str, enum.Enum):
    """Result of meal inference; UNKNOWN when no rule matched"""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    UNKNOWN = "unknown"

    @property
    def meal_type(self) -> Optional[MealType]:
        if self is MealClassification.UNKNOWN:
            return None
        return MealType(self.value)


class ResolutionStatus(str, enum.Enum):
    """Outcome of resolving free text against the catalog"""

    KNOWN = "known"
    UNKNOWN = "unknown"
    EXPLICITLY_DISALLOWED = "explicitly_disallowed"


class MatchKind(str, enum.Enum):
    """Resolver step that produced a hit"""

    ALIAS = "alias"
    CANONICAL = "canonical"
    CONTAINS = "contains"


class FruitGroup(str, enum.Enum):
    """Breakfast fruit-combining groups"""

    MELON = "melon"
    SWEET = "sweet"
    SUBACID = "subacid"
    ACID = "acid"


class ViolationType(str, enum.Enum):
    """Breakfast fruit pairing violations"""

    MELON_MUST_BE_SOLO = "MELON_MUST_BE_SOLO"
    SWEET_WITH_ACID_FORBIDDEN = "SWEET_WITH_ACID_FORBIDDEN"


class RemovalReason(str, enum.Enum):
    """Machine-readable reason attached to every removed ingredient"""

    UNKNOWN_INGREDIENT = "unknown_ingredient"
    EXPLICITLY_DISALLOWED = "explicitly_disallowed"
    NOT_ALLOWED_FOR_MEAL = "not_allowed_for_meal"
    FRUIT_PAIRING_VIOLATION = "fruit_pairing_violation"


# Every category maps to a fruit group or to None. Keep this exhaustive:
# tests assert a new Category cannot be added without a decision here.
FRUIT_GROUP_BY_CATEGORY = {
    Category.FRUIT_SWEET: FruitGroup.SWEET,
    Category.FRUIT_SUBACID: FruitGroup.SUBACID,
    Category.FRUIT_ACID: FruitGroup.ACID,
    Category.MELON: FruitGroup.MELON,
    Category.LEAFY_GREEN: None,
    Category.VEGETABLE: None,
    Category.SPROUT: None,
    Category.SEAWEED: None,
    Category.COMPLEX_CARB: None,
    Category.BEAN_LEGUME: None,
    Category.NUT_SEED: None,
    Category.OIL: None,
    Category.VINEGAR: None,
    Category.CONDIMENT: None,
    Category.SWEETENER: None,
    Category.HERB_SPICE: None,
}

FRUIT_CATEGORIES = frozenset(
    c for c, group in FRUIT_GROUP_BY_CATEGORY.items() if group is not None
)
PROTEIN_CATEGORIES = frozenset({Category.BEAN_LEGUME, Category.NUT_SEED})
# Fats, dressings and sweeteners; their presence rules out breakfast and lunch
LUNCH_BLOCKED_EXTRAS = frozenset(
    {Category.OIL, Category.VINEGAR, Category.CONDIMENT, Category.SWEETENER}
)


def fruit_group_for(category: Optional[Category]) -> Optional[FruitGroup]:
    """Return the fruit group of a category, or None for non-fruit."""
    if category is None:
        return None
    return FRUIT_GROUP_BY_CATEGORY[category]
