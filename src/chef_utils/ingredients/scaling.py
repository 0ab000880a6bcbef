"""Serving-size scaling of ingredient lines."""

import logging
from fractions import Fraction
from typing import Iterable, List, Optional

from chef_utils.ingredients.formatting import format_quantity
from chef_utils.ingredients.models import ParsedQuantity, ScaledIngredient
from chef_utils.ingredients.parsing import parse_quantity
from chef_utils.ingredients.units import agree_remainder

logger = logging.getLogger(__name__)

# Amounts that don't grow with the number of servings
NON_SCALABLE_PHRASES = frozenset(
    {"pinch", "pinches", "dash", "dashes", "to taste", "as needed"}
)


def _contains_phrase(text: str, phrases: Iterable[str]) -> bool:
    """Check if any phrase occurs in text, ignoring case."""
    text = text.lower()
    return any(phrase.lower() in text for phrase in phrases)


def scale_ratio(original_servings: int, new_servings: int) -> Optional[Fraction]:
    """Return ``new_servings / original_servings`` as an exact Fraction.

    Returns None when either count is not a positive integer, so callers can
    apply the same ratio to nutritional values without repeating the checks.
    """
    for count in (original_servings, new_servings):
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            return None
    return Fraction(new_servings, original_servings)


def scale_ingredient(
    parsed: ParsedQuantity,
    original_servings: int,
    new_servings: int,
    non_scalable: Iterable[str] = NON_SCALABLE_PHRASES,
) -> ScaledIngredient:
    """Scale a parsed ingredient line from one serving count to another.

    Lines are returned untouched when the serving counts are equal or
    invalid, when there is no leading quantity, or when the remainder
    mentions an amount that doesn't scale ("pinch", "to taste", ...).

    Args:
        parsed: Result of ``parse_quantity``.
        original_servings: Servings the recipe was written for.
        new_servings: Servings requested by the user.
        non_scalable: Phrases that mark a line as not scalable, matched
            case-insensitively anywhere in the remainder.

    Returns:
        A ScaledIngredient; ``scale_applied`` is False whenever the original
        text was passed through.

    Examples:
        >>> scale_ingredient(parse_quantity("1/2 cup sugar"), 4, 2).display_text
        '1/4 cup sugar'
        >>> scale_ingredient(parse_quantity("1 pinch salt"), 2, 8).display_text
        '1 pinch salt'
    """
    unchanged = ScaledIngredient(display_text=parsed.raw_text, scale_applied=False)

    ratio = scale_ratio(original_servings, new_servings)
    if ratio is None:
        logger.debug(
            f"Refusing to scale {parsed.raw_text!r} from {original_servings!r} "
            f"to {new_servings!r} servings"
        )
        return unchanged

    if ratio == 1:
        return unchanged

    if parsed.quantity is None or _contains_phrase(parsed.remainder, non_scalable):
        return unchanged

    scaled = parsed.quantity * ratio
    remainder = agree_remainder(parsed.remainder, scaled)
    return ScaledIngredient(
        display_text=format_quantity(scaled) + remainder, scale_applied=True
    )


def scale_ingredients(
    ingredients: Iterable[str],
    original_servings: int,
    requested_servings: Optional[int] = None,
) -> List[str]:
    """Scale a recipe's ingredient list to a requested serving count.

    Args:
        ingredients: Ingredient lines as written in the recipe.
        original_servings: Servings the recipe was written for.
        requested_servings: Servings to scale to. None keeps the recipe as is.

    Returns:
        Display strings, one per input line, in input order.
    """
    ingredients = list(ingredients)
    if requested_servings is None or requested_servings == original_servings:
        return ingredients

    return [
        scale_ingredient(parse_quantity(line), original_servings, requested_servings).display_text
        for line in ingredients
    ]
