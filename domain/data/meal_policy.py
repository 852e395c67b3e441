"""
Static meal policy rows.

- breakfast: fruit only, with fruit pairing rules
- lunch: one complex carb with greens/veg/sprouts/seaweed/herbs
- dinner: one protein base with veg plus optional oils/vinegars/condiments
"""

from domain.enums import Category, MealType

_FRUITS = (
    Category.FRUIT_SWEET,
    Category.FRUIT_SUBACID,
    Category.FRUIT_ACID,
    Category.MELON,
)
_PLANTS = (
    Category.LEAFY_GREEN,
    Category.VEGETABLE,
    Category.SPROUT,
    Category.SEAWEED,
    Category.HERB_SPICE,
)
_PROTEINS = (Category.BEAN_LEGUME, Category.NUT_SEED)
_DRESSINGS = (Category.OIL, Category.VINEGAR, Category.CONDIMENT)

MEAL_POLICY_ROWS = {
    MealType.BREAKFAST: {
        "allowed": _FRUITS,
        "blocked": _PLANTS + _PROTEINS + _DRESSINGS
        + (Category.COMPLEX_CARB, Category.SWEETENER),
        "constraints": {"single_melon_only": True},
    },
    MealType.LUNCH: {
        "allowed": (Category.COMPLEX_CARB,) + _PLANTS,
        "blocked": _FRUITS + _PROTEINS + _DRESSINGS + (Category.SWEETENER,),
        "constraints": {"max_complex_carb_choices": 1},
    },
    MealType.DINNER: {
        "allowed": _PROTEINS + _PLANTS + _DRESSINGS,
        "blocked": _FRUITS + (Category.COMPLEX_CARB, Category.SWEETENER),
        "constraints": {"max_protein_choices": 1},
    },
}
