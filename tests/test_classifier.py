"""
Tests for meal inference from recipe ingredients.
"""

import pytest

from domain.enums import MealClassification, MealType
from test_constants import BREAKFAST_BOWL, DINNER_PLATE, LUNCH_BOWL


def _recipe(*ingredients):
    return {"title": "Classify Me", "ingredients": list(ingredients)}


@pytest.mark.parametrize(
    "ingredients,expected",
    [
        (["Mango", "Apple"], MealClassification.BREAKFAST),
        (["Cantaloupe"], MealClassification.BREAKFAST),
        (["Mango", "Ketchup"], MealClassification.BREAKFAST),
        (["Quinoa", "Spinach"], MealClassification.LUNCH),
        (["Mango", "Quinoa"], MealClassification.LUNCH),
        (["Lentils", "Spinach", "Coconut Oil"], MealClassification.DINNER),
        (["Quinoa", "Lentils"], MealClassification.DINNER),
        (["Walnuts", "Honey"], MealClassification.DINNER),
        (["Mango", "Honey"], MealClassification.UNKNOWN),
        (["Quinoa", "Balsamic Vinegar"], MealClassification.UNKNOWN),
        (["Spinach", "Broccoli"], MealClassification.UNKNOWN),
        (["Ketchup"], MealClassification.UNKNOWN),
        ([], MealClassification.UNKNOWN),
    ],
)
def test_classification_rules(engine, ingredients, expected):
    assert engine.classify(_recipe(*ingredients)) is expected


@pytest.mark.parametrize(
    "recipe,expected",
    [
        (BREAKFAST_BOWL, MealType.BREAKFAST),
        (LUNCH_BOWL, MealType.LUNCH),
        (DINNER_PLATE, MealType.DINNER),
    ],
)
def test_realistic_recipes(engine, recipe, expected):
    assert engine.classify(recipe).meal_type is expected


def test_unknown_has_no_meal_type():
    assert MealClassification.UNKNOWN.meal_type is None


@pytest.mark.parametrize("recipe", [None, "Mango", {"ingredients": 5}])
def test_malformed_recipe_is_unknown(engine, recipe):
    assert engine.classify(recipe) is MealClassification.UNKNOWN
