"""Ingredient name normalization for shopping-list grouping."""

from chef_utils.ingredients.units import singular_unit

# Words whose trailing "s" is not a plural
INVARIANT_WORDS = frozenset(
    {
        "asparagus",
        "couscous",
        "citrus",
        "grits",
        "hummus",
        "molasses",
        "octopus",
        "swiss",
        "brussels",
        "schnapps",
        "series",
        "species",
    }
)


def singularize(word: str) -> str:
    """Fold a plural word to its singular form.

    Best-effort heuristic, not a lemmatizer.

    Examples:
        >>> singularize("berries")
        'berry'
        >>> singularize("tomatoes")
        'tomato'
        >>> singularize("molasses")
        'molasses'
    """
    if len(word) <= 3 or word in INVARIANT_WORDS:
        return word
    if word.endswith("ies"):
        return word[:-3] + "y"
    if word.endswith(("oes", "ches", "shes", "sses", "xes", "zes")):
        return word[:-2]
    if word.endswith(("ss", "us", "is")):
        return word
    if word.endswith("s"):
        return word[:-1]
    return word


def normalize_name(remainder: str) -> str:
    """Derive the grouping key for an ingredient remainder.

    Lower-cases the text, trims it and collapses runs of whitespace. Units are
    kept, since "1 cup flour" and "1 gram flour" are different shopping-list
    rows, but a leading unit word and the final word are folded to singular.

    Args:
        remainder: Ingredient text with its quantity removed
                   (e.g., " Cups  all-purpose flour").

    Returns:
        The normalized key (e.g., "cup all-purpose flour").

    Examples:
        >>> normalize_name(" Cups  Flour ")
        'cup flour'
        >>> normalize_name(" eggs")
        'egg'
    """
    words = remainder.lower().split()
    if not words:
        return ""

    unit = singular_unit(words[0])
    if unit is not None:
        words[0] = unit

    if len(words) > 1 or unit is None:
        words[-1] = singularize(words[-1])

    return " ".join(words)
