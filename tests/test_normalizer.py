"""
Tests for ingredient text normalization and whole-token matching.
"""

import pytest

from core.utils.helpers import contains_token, normalize, optional_text


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Quinoa", "quinoa"),
        ("  Cooked   Quinoa  ", "cooked quinoa"),
        ("Chickpeas (garbanzo)", "chickpeas"),
        ("Red-Wine Vinegar!", "red wine vinegar"),
        ("1/2 cup Blueberries", "1 2 cup blueberries"),
        ("MCT Oil", "mct oil"),
        ("(just a note)", ""),
        ("", ""),
        ("   ", ""),
    ],
)
def test_normalize_examples(text, expected):
    assert normalize(text) == expected


def test_normalize_drops_digits_when_asked():
    assert normalize("2 cups Kale", keep_digits=False) == "cups kale"
    assert normalize("2 cups Kale", keep_digits=True) == "2 cups kale"


@pytest.mark.parametrize("value", [None, 42, 3.5, ["quinoa"], {"item": "quinoa"}, True])
def test_normalize_non_string_is_empty(value):
    assert normalize(value) == ""


@pytest.mark.parametrize(
    "text",
    [
        "Cooked Quinoa (rinsed)",
        "1 cup  Honey-Mustard,, chilled",
        "Ñame & Café",
        "((nested) parens) kale",
        "TAB\tand\nnewline",
        "a (b) c (d",
    ],
)
@pytest.mark.parametrize("keep_digits", [True, False])
def test_normalize_is_idempotent(text, keep_digits):
    once = normalize(text, keep_digits=keep_digits)
    assert normalize(once, keep_digits=keep_digits) == once


def test_contains_token_requires_letter_boundaries():
    assert contains_token("cooked quinoa", "quinoa")
    assert contains_token("quinoa salad", "quinoa")
    assert contains_token("2 lemon", "lemon")
    assert not contains_token("limestone", "lime")
    assert not contains_token("fresh lemongrass", "lemon")
    assert not contains_token("", "lime")
    assert not contains_token("lime", "")


def test_optional_text():
    assert optional_text("  Mango ") == "Mango"
    assert optional_text("   ") is None
    assert optional_text(7) is None
    assert optional_text(None) is None
