"""Render ingredient quantities as kitchen-friendly strings."""

import math
from numbers import Real
from typing import Optional

# --- Constants ---

FRACTION_TOLERANCE = 0.05
WHOLE_TOLERANCE = 1e-9

# Checked in order; the first candidate within tolerance wins.
COMMON_FRACTIONS = (
    (0.25, "1/4"),
    (0.33, "1/3"),
    (0.5, "1/2"),
    (0.67, "2/3"),
    (0.75, "3/4"),
)

# --- Functions ---


def _snap_fraction(fraction: float, tolerance: float = FRACTION_TOLERANCE) -> Optional[str]:
    """Return the common fraction closest to ``fraction``, if within tolerance."""
    for candidate, text in COMMON_FRACTIONS:
        if abs(fraction - candidate) < tolerance:
            return text
    return None


def _format_decimal(value: float) -> str:
    rounded = round(value, 1)
    if rounded == math.floor(rounded):
        return str(int(rounded))
    return f"{rounded:.1f}"


def format_quantity(value: Real, tolerance: float = FRACTION_TOLERANCE) -> str:
    """Format a quantity for display, preferring common culinary fractions.

    Whole numbers render without a decimal point. Other values are split into
    a whole part and a fractional part; the fractional part snaps to 1/4, 1/3,
    1/2, 2/3 or 3/4 when it is within ``tolerance`` of one of them, and
    otherwise the value is rounded to one decimal place (a rounding that
    lands on a whole number drops the ".0").

    Args:
        value: The quantity (int, float or Fraction).
        tolerance: Maximum distance for snapping to a common fraction.

    Returns:
        The display string.

    Examples:
        >>> format_quantity(0.5)
        '1/2'
        >>> format_quantity(1.5)
        '1 1/2'
        >>> format_quantity(0.9)
        '0.9'
        >>> format_quantity(3)
        '3'
    """
    try:
        value = float(value)
    except OverflowError:
        # Beyond float range any fractional part is negligible
        return str(round(value))

    if value < 0:
        return "-" + format_quantity(-value, tolerance)

    if abs(value - round(value)) < WHOLE_TOLERANCE:
        return str(int(round(value)))

    whole = math.floor(value)
    fraction_text = _snap_fraction(value - whole, tolerance)
    if fraction_text is None:
        return _format_decimal(value)

    return f"{whole} {fraction_text}" if whole > 0 else fraction_text
