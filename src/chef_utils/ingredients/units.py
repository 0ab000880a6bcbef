"""Kitchen unit vocabulary and singular/plural agreement."""

import re
from numbers import Real
from types import MappingProxyType
from typing import Optional

# Singular form -> plural form. Abbreviations (tbsp, oz, g, ml) have no
# plural and are left alone.
UNIT_MAP = MappingProxyType(
    {
        # Volume
        "cup": "cups",
        "tablespoon": "tablespoons",
        "teaspoon": "teaspoons",
        "milliliter": "milliliters",
        "millilitre": "millilitres",
        "liter": "liters",
        "litre": "litres",
        "pint": "pints",
        "quart": "quarts",
        "gallon": "gallons",
        # Weight
        "ounce": "ounces",
        "pound": "pounds",
        "lb": "lbs",
        "gram": "grams",
        "kilogram": "kilograms",
        # Count/measure
        "pinch": "pinches",
        "dash": "dashes",
        "drop": "drops",
        "splash": "splashes",
        "handful": "handfuls",
        "bunch": "bunches",
        "can": "cans",
        "jar": "jars",
        "package": "packages",
        "slice": "slices",
        "piece": "pieces",
        "clove": "cloves",
        "head": "heads",
        "stick": "sticks",
        "sprig": "sprigs",
    }
)

# Create reverse mapping for lookup
UNIT_LOOKUP = MappingProxyType(
    {
        **{singular: singular for singular in UNIT_MAP},
        **{plural: singular for singular, plural in UNIT_MAP.items()},
    }
)

_LEADING_WORD = re.compile(r"^(\s*)([A-Za-z]+)")


def singular_unit(word: str) -> Optional[str]:
    """Return the singular form of a unit word, or None if it is not a unit.

    Examples:
        >>> singular_unit("Cups")
        'cup'
        >>> singular_unit("flour") is None
        True
    """
    return UNIT_LOOKUP.get(word.lower().strip("."))


def agree_unit(word: str, quantity: Real) -> str:
    """Make a unit word singular or plural to match ``quantity``.

    Quantities of one or less take the singular ("1/2 cup", "1 cup"), larger
    ones the plural ("1 1/2 cups"). Words that are not known units are
    returned unchanged, as is the capitalisation of the first letter.
    """
    singular = singular_unit(word)
    if singular is None:
        return word

    agreed = singular if quantity <= 1 else UNIT_MAP[singular]
    if word[:1].isupper():
        agreed = agreed.capitalize()
    return agreed


def agree_remainder(remainder: str, quantity: Real) -> str:
    """Apply unit agreement to the first word of an ingredient remainder."""
    match = _LEADING_WORD.match(remainder)
    if not match:
        return remainder

    leading_space, word = match.groups()
    agreed = agree_unit(word, quantity)
    if agreed == word:
        return remainder
    return leading_space + agreed + remainder[match.end():]
