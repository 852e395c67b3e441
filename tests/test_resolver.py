"""
Tests for resolving free ingredient text onto the protocol catalog.
"""

import pytest

from domain.enums import Category, MatchKind, ResolutionStatus
from services.resolver_service import IngredientResolver
from test_constants import RESOLVES_TO, UNKNOWN_TEXT
from test_fixtures import make_small_catalog


@pytest.mark.parametrize("text,expected", sorted(RESOLVES_TO.items()))
def test_resolves_realistic_text(engine, text, expected):
    resolution = engine.resolve(text)
    assert resolution.is_known
    assert resolution.canonical_name == expected
    assert resolution.status is ResolutionStatus.KNOWN


@pytest.mark.parametrize("text", UNKNOWN_TEXT)
def test_unknown_text(engine, text):
    resolution = engine.resolve(text)
    assert not resolution.is_known
    assert resolution.canonical_name is None
    assert resolution.category is None
    assert resolution.status is ResolutionStatus.UNKNOWN


@pytest.mark.parametrize("value", [None, 12, ["Quinoa"], {"item": "Quinoa"}])
def test_non_string_input_is_unknown(engine, value):
    resolution = engine.resolve(value)
    assert resolution.status is ResolutionStatus.UNKNOWN
    assert resolution.source_text == ""


def test_match_kinds(engine):
    assert engine.resolve("apple").match is MatchKind.ALIAS
    assert engine.resolve("MANGO").match is MatchKind.CANONICAL
    assert engine.resolve("Cooked Quinoa").match is MatchKind.CONTAINS
    assert engine.resolve("Ketchup").match is None


def test_cooked_quinoa_is_complex_carb(engine):
    resolution = engine.resolve("Cooked Quinoa")
    assert resolution.canonical_name == "Quinoa"
    assert resolution.category is Category.COMPLEX_CARB
    assert resolution.normalized == "cooked quinoa"


@pytest.mark.parametrize("text", ["apple cider vinegar", "Apple Cider Vinegar", "ACV", "cider vinegar"])
def test_disallowed_aliases(engine, text):
    resolution = engine.resolve(text)
    assert resolution.status is ResolutionStatus.EXPLICITLY_DISALLOWED
    assert resolution.is_disallowed
    assert not resolution.is_known
    assert resolution.canonical_name is None


def test_alias_beats_contains(engine):
    # "sweet potatoes" contains no whole-token canonical name but is an alias
    assert engine.resolve("Sweet Potatoes").canonical_name == "Sweet Potato"
    # plural suffix is not a token boundary
    assert not engine.resolve("2 roasted sweet potatoes").is_known


def test_longest_contained_name_wins(engine):
    assert engine.resolve("fresh wild blueberries").canonical_name == "Wild Blueberries"
    assert engine.resolve("chopped lemon grass").canonical_name == "Lemon Grass"
    assert engine.resolve("broccoli sprouts, a handful").canonical_name == "Broccoli Sprouts"


def test_equal_length_tie_uses_category_priority(engine):
    # Mango (fruit-sweet) and Lemon (fruit-acid) are both five letters
    assert engine.resolve("mango lemon salsa").canonical_name == "Mango"
    assert engine.resolve("lemon mango salsa").canonical_name == "Mango"
    # sweetener is ranked before herbs
    assert engine.resolve("basil honey drizzle").canonical_name == "Honey"


def test_tie_break_follows_explicit_priority():
    leek_first = IngredientResolver(make_small_catalog(priority=("Leek", "Lime", "Carrot", "Quinoa")))
    lime_first = IngredientResolver(make_small_catalog(priority=("Lime", "Leek", "Carrot", "Quinoa")))

    assert leek_first.resolve("leek and lime broth").canonical_name == "Leek"
    assert lime_first.resolve("leek and lime broth").canonical_name == "Lime"


def test_tie_break_defaults_to_declaration_order():
    resolver = IngredientResolver(make_small_catalog())
    assert resolver.resolve("lime and leek broth").canonical_name == "Leek"


def test_keep_digits_variant():
    resolver = IngredientResolver(make_small_catalog(keep_digits=False))
    resolution = resolver.resolve("2 cups quinoa")
    assert resolution.normalized == "cups quinoa"
    assert resolution.canonical_name == "Quinoa"


def test_is_allowed_ingredient(engine):
    assert engine.is_allowed_ingredient("Cooked Quinoa")
    assert engine.is_allowed_ingredient("honeydew")
    assert not engine.is_allowed_ingredient("Ketchup")
    assert not engine.is_allowed_ingredient("acv")


def test_category_of_takes_canonical_names(engine):
    assert engine.resolver.category_of("Lentils") is Category.BEAN_LEGUME
    assert engine.resolver.category_of("lentils") is Category.BEAN_LEGUME
    assert engine.resolver.category_of("Ketchup") is None


def test_resolution_is_deterministic(engine):
    first = [engine.resolve(text) for text in RESOLVES_TO]
    second = [engine.resolve(text) for text in RESOLVES_TO]
    assert first == second
