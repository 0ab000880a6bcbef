import pytest

from chef_utils.ingredients.normalization import normalize_name, singularize
from chef_utils.ingredients.units import agree_remainder, agree_unit, singular_unit


@pytest.mark.parametrize(
    "remainder, expected_key",
    [
        (" cups flour", "cup flour"),
        (" cup flour", "cup flour"),
        (" gram flour", "gram flour"),
        ("  Cups   All-Purpose  Flour ", "cup all-purpose flour"),
        (" eggs", "egg"),
        (" large eggs", "large egg"),
        (" cups fresh blueberries", "cup fresh blueberry"),
        (" tbsp molasses", "tbsp molasses"),
        (" cups", "cup"),
        ("Salt to taste", "salt to taste"),
        ("", ""),
        ("   ", ""),
    ],
)
def test_normalize_name(remainder, expected_key):
    assert normalize_name(remainder) == expected_key


def test_normalize_name_keeps_units_distinct():
    assert normalize_name(" cup flour") != normalize_name(" gram flour")


@pytest.mark.parametrize(
    "word, expected",
    [
        ("eggs", "egg"),
        ("berries", "berry"),
        ("tomatoes", "tomato"),
        ("peaches", "peach"),
        ("radishes", "radish"),
        ("glasses", "glass"),
        ("onions", "onion"),
        ("molasses", "molasses"),
        ("hummus", "hummus"),
        ("swiss", "swiss"),
        ("watercress", "watercress"),
        ("gas", "gas"),
        ("flour", "flour"),
    ],
)
def test_singularize(word, expected):
    assert singularize(word) == expected


@pytest.mark.parametrize(
    "word, expected",
    [
        ("cups", "cup"),
        ("Cup", "cup"),
        ("tablespoons", "tablespoon"),
        ("cloves", "clove"),
        ("lbs", "lb"),
        ("tbsp", None),
        ("flour", None),
    ],
)
def test_singular_unit(word, expected):
    assert singular_unit(word) == expected


@pytest.mark.parametrize(
    "word, quantity, expected",
    [
        ("cups", 1, "cup"),
        ("cups", 0.5, "cup"),
        ("cup", 2, "cups"),
        ("cup", 1.5, "cups"),
        ("Pinch", 3, "Pinches"),
        ("lb", 2, "lbs"),
        ("lbs", 1, "lb"),
        ("tbsp", 3, "tbsp"),
        ("flour", 2, "flour"),
    ],
)
def test_agree_unit(word, quantity, expected):
    assert agree_unit(word, quantity) == expected


def test_agree_remainder_preserves_spacing():
    assert agree_remainder("  cup   rice", 2) == "  cups   rice"
    assert agree_remainder(" cups, sifted flour", 1) == " cup, sifted flour"
    assert agree_remainder(" large eggs", 1) == " large eggs"
    assert agree_remainder("", 1) == ""
