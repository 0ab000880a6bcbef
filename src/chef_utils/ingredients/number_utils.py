from fractions import Fraction

# Unicode vulgar fractions accepted in ingredient quantities
UNICODE_FRAC = {
    "¼": Fraction(1, 4),
    "½": Fraction(1, 2),
    "¾": Fraction(3, 4),
    "⅓": Fraction(1, 3),
    "⅔": Fraction(2, 3),
    "⅕": Fraction(1, 5),
    "⅖": Fraction(2, 5),
    "⅗": Fraction(3, 5),
    "⅘": Fraction(4, 5),
    "⅙": Fraction(1, 6),
    "⅚": Fraction(5, 6),
    "⅛": Fraction(1, 8),
    "⅜": Fraction(3, 8),
    "⅝": Fraction(5, 8),
    "⅞": Fraction(7, 8),
}


def _is_integer(text: str) -> bool:
    """Check if a string is made only of ASCII digits."""
    return text.isascii() and text.isdigit()


def _is_fraction(text: str) -> bool:
    """Check if a string represents a valid fraction (e.g., '1/2')."""
    if "/" not in text:
        return False
    parts = text.split("/")
    return len(parts) == 2 and all(_is_integer(part) for part in parts)


def _parse_fraction(text: str) -> Fraction:
    """Parse a fraction string (e.g., '1/2') into a Fraction."""
    if not _is_fraction(text):
        raise ValueError(f"Not a fraction: {text}")

    numerator_str, denominator_str = text.split("/")
    numerator = int(numerator_str)
    denominator = int(denominator_str)

    if denominator == 0:
        raise ZeroDivisionError("Division by zero in fraction")

    return Fraction(numerator, denominator)


def _parse_unicode_fraction(char: str) -> Fraction:
    """Look up a single unicode fraction character (e.g., '½')."""
    try:
        return UNICODE_FRAC[char]
    except KeyError:
        raise ValueError(f"Not a unicode fraction: {char}") from None
