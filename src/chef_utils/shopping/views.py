"""Shopping list display helpers: search, by-recipe grouping and export."""

from typing import Dict, Iterable, List, Sequence, Tuple

import pandas as pd

from chef_utils.ingredients.formatting import format_quantity
from chef_utils.ingredients.models import ConsolidatedEntry, ShoppingItem

CONSOLIDATED_COLUMNS = ["item", "quantity", "recipes", "recipe_count"]


def filter_items(items: Iterable[ShoppingItem], query: str) -> List[ShoppingItem]:
    """Keep items whose ingredient line or recipe name contains ``query``.

    Matching is case-insensitive. A blank query keeps everything.
    """
    items = list(items)
    query = query.strip().lower()
    if not query:
        return items
    return [
        item
        for item in items
        if query in item.ingredient_line.lower() or query in item.recipe_name.lower()
    ]


def group_by_recipe(items: Iterable[ShoppingItem]) -> Dict[str, List[ShoppingItem]]:
    """Group items by recipe id (or name when there is no id), first-seen order."""
    groups: Dict[str, List[ShoppingItem]] = {}
    for item in items:
        key = item.recipe_id if item.recipe_id is not None else item.recipe_name
        groups.setdefault(key, []).append(item)
    return groups


def completion(items: Sequence[ShoppingItem]) -> Tuple[int, int, int]:
    """Return ``(checked, total, percent_complete)`` for a shopping list.

    The percentage is rounded half up to a whole number; an empty list is 0%.
    """
    total = len(items)
    checked = sum(1 for item in items if item.checked)
    if total == 0:
        return 0, 0, 0
    percent = (200 * checked + total) // (2 * total)
    return checked, total, percent


def consolidated_dataframe(entries: Iterable[ConsolidatedEntry]) -> pd.DataFrame:
    """Build a DataFrame of consolidated shopping-list rows for export.

    Args:
        entries: Output of ``consolidate``.

    Returns:
        DataFrame with columns: item, quantity, recipes, recipe_count. The
        quantity column holds the formatted total, or an empty string for
        rows without one; recipes are joined with "; ".
    """
    rows = [
        {
            "item": entry.combined_text,
            "quantity": (
                format_quantity(entry.combined_quantity)
                if entry.combined_quantity is not None
                else ""
            ),
            "recipes": "; ".join(entry.recipes),
            "recipe_count": len(entry.recipes),
        }
        for entry in entries
    ]
    return pd.DataFrame(rows, columns=CONSOLIDATED_COLUMNS)
