"""Merge ingredient lines from several recipes into one shopping list."""

import logging
from typing import Iterable, List, Tuple, Union

from chef_utils.ingredients.formatting import format_quantity
from chef_utils.ingredients.models import ConsolidatedEntry, ShoppingItem
from chef_utils.ingredients.normalization import normalize_name
from chef_utils.ingredients.parsing import parse_quantity
from chef_utils.ingredients.units import agree_remainder

logger = logging.getLogger(__name__)

EntryLike = Union[ShoppingItem, Tuple[str, str]]


def _as_item(entry: EntryLike) -> ShoppingItem:
    if isinstance(entry, ShoppingItem):
        return entry
    return ShoppingItem(*entry)


def consolidate(entries: Iterable[EntryLike]) -> List[ConsolidatedEntry]:
    """Combine ingredient lines that refer to the same item and unit.

    Lines are grouped by the normalized form of the text after their quantity,
    so "2 cups flour" and "1 cup flour" merge into "3 cups flour" while
    "1 gram flour" stays on its own row. Lines without a quantity (e.g.,
    "salt to taste") join their group but add nothing to the total.

    Args:
        entries: ShoppingItem records, or ``(ingredient_line, recipe_name)``
                 tuples, in display order.

    Returns:
        One ConsolidatedEntry per group, in the order each group was first
        seen. Contributing recipe names are de-duplicated in first-seen order.

    Examples:
        >>> [e.combined_text for e in consolidate([("2 cups flour", "A"), ("1 cup flour", "B")])]
        ['3 cups flour']
    """
    groups = {}
    count = 0
    for entry in entries:
        item = _as_item(entry)
        parsed = parse_quantity(item.ingredient_line)
        key = normalize_name(parsed.remainder)
        group = groups.setdefault(key, {"parsed": [], "recipes": []})
        group["parsed"].append(parsed)
        if item.recipe_name not in group["recipes"]:
            group["recipes"].append(item.recipe_name)
        count += 1

    consolidated = []
    for key, group in groups.items():
        quantified = [p for p in group["parsed"] if p.quantity is not None]

        if quantified:
            total = sum(p.quantity for p in quantified)
            remainder = agree_remainder(quantified[0].remainder, total)
            combined_text = format_quantity(total) + remainder
        else:
            total = None
            combined_text = group["parsed"][0].remainder

        consolidated.append(
            ConsolidatedEntry(
                normalized_key=key,
                combined_quantity=total,
                combined_text=combined_text,
                recipes=tuple(group["recipes"]),
                lines=tuple(p.raw_text for p in group["parsed"]),
            )
        )

    logger.debug(f"Consolidated {count} shopping list entries into {len(consolidated)} rows")
    return consolidated
