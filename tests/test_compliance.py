"""
Tests for recipe sanitization against the meal policy and fruit pairing.

Covers:
- per-item removals (unknown, explicitly disallowed, not allowed for meal)
- breakfast fruit pairing auto-removal
- removal ordering and the display strings shown to users
- malformed input handling and immutability of the input recipe
"""

import copy

import pytest

from domain.enums import Category, MealClassification, MealType, RemovalReason
from test_constants import BREAKFAST_BOWL, DINNER_PLATE, LUNCH_BOWL, MESSY_BREAKFAST
from test_fixtures import items_of, removed_texts


def _recipe(*ingredients, **extra):
    return {"id": "r-1", "title": "Test Recipe", "ingredients": list(ingredients), **extra}


# =============================================================================
# PER-ITEM FILTER
# =============================================================================


def test_cooked_quinoa_removed_at_dinner(engine):
    result = engine.sanitize(_recipe("Cooked Quinoa", "Lentils"), MealType.DINNER)

    assert items_of(result) == ["Lentils"]
    assert len(result.removed) == 1
    removal = result.removed[0]
    assert removal.original_text == "Cooked Quinoa"
    assert removal.resolved_name == "Quinoa"
    assert removal.reason_code is RemovalReason.NOT_ALLOWED_FOR_MEAL
    assert removal.reason_message == "not allowed for dinner (complex-carb)"


@pytest.mark.parametrize("meal_type", list(MealType))
def test_unknown_ingredient_removed_at_every_meal(engine, meal_type):
    result = engine.sanitize(_recipe("Ketchup"), meal_type)

    assert items_of(result) == []
    assert result.removed[0].reason_message == "unknown ingredient"
    assert result.removed[0].reason_code is RemovalReason.UNKNOWN_INGREDIENT
    assert result.removed[0].resolved_name is None


def test_apple_cider_vinegar_is_explicitly_disallowed(engine):
    result = engine.sanitize(_recipe("Apple cider vinegar", "Lentils"), MealType.DINNER)

    assert items_of(result) == ["Lentils"]
    assert result.removed[0].reason_message == "explicitly disallowed"
    assert result.removed[0].reason_code is RemovalReason.EXPLICITLY_DISALLOWED


def test_sweetener_is_blocked_at_dinner(engine):
    result = engine.sanitize(_recipe("Lentils", "Honey"), MealType.DINNER)
    assert result.removed[0].reason_message == "not allowed for dinner (sweetener)"


def test_empty_lines_are_unknown(engine):
    result = engine.sanitize(_recipe("", {"amount": "1 tsp"}, 42), MealType.LUNCH)

    assert items_of(result) == []
    assert [r.reason_code for r in result.removed] == [RemovalReason.UNKNOWN_INGREDIENT] * 3
    assert [r.original_text for r in result.removed] == ["", "", ""]


# =============================================================================
# BREAKFAST FRUIT PAIRING
# =============================================================================


def test_melon_with_mango_keeps_melon(engine):
    result = engine.sanitize(_recipe("Cantaloupe", "Mango"), MealType.BREAKFAST)

    assert items_of(result) == ["Cantaloupe"]
    assert removed_texts(result) == ["Mango"]
    removal = result.removed[0]
    assert removal.reason_code is RemovalReason.FRUIT_PAIRING_VIOLATION
    assert "MELON_MUST_BE_SOLO" in removal.reason_message


def test_two_melons_are_both_kept(engine):
    result = engine.sanitize(_recipe("Cantaloupe", "Honeydew"), MealType.BREAKFAST)
    assert items_of(result) == ["Cantaloupe", "Honeydew"]
    assert result.removed == ()


def test_sweet_first_drops_acid(engine):
    result = engine.sanitize(_recipe("Mango", "Lemon"), MealType.BREAKFAST)

    assert items_of(result) == ["Mango"]
    assert removed_texts(result) == ["Lemon"]
    assert result.removed[0].reason_message == (
        "breakfast fruit pairing rule violation (SWEET_WITH_ACID_FORBIDDEN)"
    )


def test_acid_first_drops_sweet(engine):
    result = engine.sanitize(_recipe("Lemon", "Mango", "Apple"), MealType.BREAKFAST)

    assert items_of(result) == ["Lemon", "Apple"]
    assert removed_texts(result) == ["Mango"]


def test_subacid_first_keeps_only_subacid_fruit(engine):
    # first fruit is neither sweet nor acid, so the fallback branch applies:
    # keep subacid fruit plus the first one. Mango is not kept even though
    # it would pair with Apple.
    result = engine.sanitize(_recipe("Apple", "Mango", "Lemon"), MealType.BREAKFAST)

    assert items_of(result) == ["Apple"]
    assert removed_texts(result) == ["Mango", "Lemon"]
    assert all(r.reason_code is RemovalReason.FRUIT_PAIRING_VIOLATION for r in result.removed)


def test_pairing_not_applied_outside_breakfast(engine):
    # fruit is removed by the policy at lunch, never by pairing
    result = engine.sanitize(_recipe("Mango", "Lemon", "Quinoa"), MealType.LUNCH)

    assert items_of(result) == ["Quinoa"]
    assert {r.reason_code for r in result.removed} == {RemovalReason.NOT_ALLOWED_FOR_MEAL}


def test_per_item_removals_precede_pairing_removals(engine):
    result = engine.sanitize(MESSY_BREAKFAST, MealType.BREAKFAST)

    assert items_of(result) == ["Cantaloupe"]
    assert removed_texts(result) == ["Ketchup", "Quinoa", "Mango"]
    assert list(result.display_lines) == [
        "Ketchup: unknown ingredient",
        "Quinoa -> Quinoa: not allowed for breakfast (complex-carb)",
        "Mango -> Mango: breakfast fruit pairing rule violation (MELON_MUST_BE_SOLO)",
    ]


# =============================================================================
# ROUND TRIPS AND INPUT HANDLING
# =============================================================================


@pytest.mark.parametrize(
    "recipe,meal_type",
    [
        (BREAKFAST_BOWL, MealType.BREAKFAST),
        (LUNCH_BOWL, MealType.LUNCH),
        (DINNER_PLATE, MealType.DINNER),
    ],
)
def test_compliant_recipe_round_trips(engine, recipe, meal_type):
    result = engine.sanitize(recipe, meal_type)

    assert result.removed == ()
    before = [engine.resolve(i if isinstance(i, str) else i["item"]).canonical_name for i in recipe["ingredients"]]
    after = [i.canonical_name for i in result.cleaned_recipe.ingredients]
    assert after == before

    again = engine.sanitize(result.cleaned_recipe, meal_type)
    assert again.removed == ()


def test_structured_lines_keep_amount_and_raw(engine):
    result = engine.sanitize(LUNCH_BOWL, MealType.LUNCH)
    first = result.cleaned_recipe.ingredients[0]

    assert first.amount == "1 cup"
    assert first.item == "Cooked Quinoa"
    assert first.raw == "1 cup cooked quinoa"
    assert first.canonical_name == "Quinoa"
    assert first.category is Category.COMPLEX_CARB


def test_item_falls_back_to_raw(engine):
    result = engine.sanitize(_recipe({"raw": "2 cups cooked quinoa"}), MealType.LUNCH)
    assert result.cleaned_recipe.ingredients[0].canonical_name == "Quinoa"


def test_extra_recipe_keys_are_preserved(engine):
    result = engine.sanitize(LUNCH_BOWL, MealType.LUNCH)
    dumped = result.cleaned_recipe.model_dump()

    assert dumped["id"] == "rcp-lunch-001"
    assert dumped["title"] == "Quinoa Green Bowl"
    assert dumped["tags"] == ["lunch", "quick"]
    assert dumped["meal_type"] == MealType.LUNCH


def test_input_recipe_is_not_mutated(engine):
    recipe = copy.deepcopy(MESSY_BREAKFAST)
    engine.sanitize(recipe, MealType.BREAKFAST)
    assert recipe == MESSY_BREAKFAST


@pytest.mark.parametrize(
    "recipe",
    [None, "not a recipe", 42, [], {}, {"ingredients": "Quinoa"}, {"ingredients": None}],
)
def test_malformed_recipe_is_treated_as_empty(engine, recipe):
    result = engine.sanitize(recipe, MealType.LUNCH)
    assert result.cleaned_recipe.ingredients == ()
    assert result.removed == ()


def test_non_string_fields_are_coerced(engine):
    result = engine.sanitize({"id": 7, "title": ["x"], "ingredients": ["Quinoa"]}, "lunch")
    assert result.cleaned_recipe.id == "7"
    assert result.cleaned_recipe.title is None
    assert result.meal_type is MealType.LUNCH


@pytest.mark.parametrize("raw_id,expected", [(7, "7"), (3.5, "3.5"), (" r-9 ", "r-9"), (True, None)])
def test_numeric_ids_are_kept_as_text(engine, raw_id, expected):
    result = engine.sanitize({"id": raw_id, "ingredients": ["Quinoa"]}, MealType.LUNCH)
    assert result.cleaned_recipe.id == expected


def test_unknown_meal_type_is_rejected(engine):
    with pytest.raises(ValueError):
        engine.sanitize(LUNCH_BOWL, "brunch")


# =============================================================================
# SCREENING AND CLASSIFY-THEN-SANITIZE
# =============================================================================


def test_screen_ingredients_ignores_meal_rules(engine):
    result = engine.screen_ingredients(["Mango", "Ketchup", "Lentils", "ACV"])

    assert [i.canonical_name for i in result.ingredients] == ["Mango", "Lentils"]
    assert [r.reason_code for r in result.removed] == [
        RemovalReason.UNKNOWN_INGREDIENT,
        RemovalReason.EXPLICITLY_DISALLOWED,
    ]


def test_screen_ingredients_malformed(engine):
    assert engine.screen_ingredients(None).ingredients == ()


def test_classify_and_sanitize_uses_inferred_meal(engine):
    result = engine.classify_and_sanitize(_recipe("Lentils", "Cooked Quinoa", "Spinach"))

    assert result.classification is MealClassification.DINNER
    assert [i.canonical_name for i in result.cleaned_recipe.ingredients] == ["Lentils", "Spinach"]
    assert result.removed[0].reason_message == "not allowed for dinner (complex-carb)"
    assert result.cleaned_recipe.meal_type is MealType.DINNER


def test_classify_and_sanitize_leaves_unknown_recipes_alone(engine):
    result = engine.classify_and_sanitize(_recipe("Spinach", "Ketchup"))

    assert result.classification is MealClassification.UNKNOWN
    assert [i.item for i in result.cleaned_recipe.ingredients] == ["Spinach", "Ketchup"]
    assert result.cleaned_recipe.ingredients[1].canonical_name is None
    assert result.cleaned_recipe.meal_type is None
    assert result.removed == ()
