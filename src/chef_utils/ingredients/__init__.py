"""Ingredient quantity parsing, scaling and normalization utilities."""

from .formatting import FRACTION_TOLERANCE, format_quantity
from .models import ConsolidatedEntry, ParsedQuantity, ScaledIngredient, ShoppingItem
from .normalization import normalize_name, singularize
from .parsing import QUANTITY_MATCHERS, parse_quantity
from .scaling import NON_SCALABLE_PHRASES, scale_ingredient, scale_ingredients, scale_ratio
from .units import UNIT_MAP, agree_remainder, agree_unit, singular_unit

__all__ = [
    "parse_quantity",
    "QUANTITY_MATCHERS",
    "format_quantity",
    "FRACTION_TOLERANCE",
    "scale_ingredient",
    "scale_ingredients",
    "scale_ratio",
    "NON_SCALABLE_PHRASES",
    "normalize_name",
    "singularize",
    "UNIT_MAP",
    "agree_unit",
    "agree_remainder",
    "singular_unit",
    "ParsedQuantity",
    "ScaledIngredient",
    "ShoppingItem",
    "ConsolidatedEntry",
]
