"""Ingredient quantity parsing."""

import logging
import re
from fractions import Fraction
from typing import Optional, Tuple

from chef_utils.ingredients.models import ParsedQuantity
from chef_utils.ingredients.number_utils import (
    UNICODE_FRAC,
    _parse_fraction,
    _parse_unicode_fraction,
)

logger = logging.getLogger(__name__)

# --- Constants ---

_UNICODE_CLASS = "[" + "".join(UNICODE_FRAC) + "]"

# Every token must be followed by whitespace, which is left in the remainder.
_MIXED_NUMBER = re.compile(r"([0-9]+)\s+([0-9]+/[0-9]+)(?=\s)")
_MIXED_UNICODE = re.compile(r"([0-9]+)\s*(" + _UNICODE_CLASS + r")(?=\s)")
_FRACTION = re.compile(r"([0-9]+/[0-9]+)(?=\s)")
_UNICODE_FRACTION = re.compile(r"(" + _UNICODE_CLASS + r")(?=\s)")
_DECIMAL = re.compile(r"([0-9]+\.[0-9]+)(?=\s)")
_INTEGER = re.compile(r"([0-9]+)(?=\s)")

# --- Matchers ---


def _parse_mixed_number(line: str) -> Tuple[Optional[Fraction], int]:
    """Parse mixed numbers like '1 1/2', '1 ½' or '1½'."""
    match = _MIXED_NUMBER.match(line)
    if match:
        amount = int(match.group(1)) + _parse_fraction(match.group(2))
        return amount, match.end()

    match = _MIXED_UNICODE.match(line)
    if match:
        amount = int(match.group(1)) + _parse_unicode_fraction(match.group(2))
        return amount, match.end()

    return None, 0


def _parse_simple_fraction(line: str) -> Tuple[Optional[Fraction], int]:
    """Parse fractions like '1/2' or '½'."""
    match = _FRACTION.match(line)
    if match:
        return _parse_fraction(match.group(1)), match.end()

    match = _UNICODE_FRACTION.match(line)
    if match:
        return _parse_unicode_fraction(match.group(1)), match.end()

    return None, 0


def _parse_decimal(line: str) -> Tuple[Optional[Fraction], int]:
    """Parse decimals like '2.5'."""
    match = _DECIMAL.match(line)
    if match:
        return Fraction(match.group(1)), match.end()
    return None, 0


def _parse_integer(line: str) -> Tuple[Optional[Fraction], int]:
    """Parse integers like '3'."""
    match = _INTEGER.match(line)
    if match:
        return Fraction(int(match.group(1))), match.end()
    return None, 0


# Tried in order; the first matcher that recognises a token wins.
QUANTITY_MATCHERS = (
    _parse_mixed_number,
    _parse_simple_fraction,
    _parse_decimal,
    _parse_integer,
)

# --- Functions ---


def parse_quantity(line: str) -> ParsedQuantity:
    """Split an ingredient line into its leading quantity and the rest.

    The quantity must sit at the very start of the line and be followed by
    whitespace. Lines without one, lines whose fraction has a zero
    denominator, and lines whose number is too large for a float come back
    with ``quantity=None`` and the whole line as the remainder.

    Args:
        line: A single ingredient entry (e.g., "1 1/2 cups flour").

    Returns:
        A ParsedQuantity whose remainder keeps the whitespace that followed
        the quantity, so ``format_quantity(quantity) + remainder`` rebuilds
        a readable line.

    Examples:
        >>> parse_quantity("1 1/2 cups flour").quantity
        Fraction(3, 2)
        >>> parse_quantity("1 1/2 cups flour").remainder
        ' cups flour'
        >>> parse_quantity("Salt to taste").quantity is None
        True
    """
    try:
        for matcher in QUANTITY_MATCHERS:
            amount, end = matcher(line)
            if amount is not None:
                float(amount)  # quantities must be representable for display
                return ParsedQuantity(raw_text=line, quantity=amount, remainder=line[end:])
    except (ValueError, ZeroDivisionError, OverflowError) as e:
        logger.debug(f"Unparseable quantity in {line!r}: {e}")

    return ParsedQuantity(raw_text=line, quantity=None, remainder=line)
