"""Shopping list consolidation and display helpers."""

from chef_utils.ingredients.models import ConsolidatedEntry, ShoppingItem

from .consolidation import consolidate
from .views import completion, consolidated_dataframe, filter_items, group_by_recipe

__all__ = [
    "consolidate",
    "filter_items",
    "group_by_recipe",
    "completion",
    "consolidated_dataframe",
    "ShoppingItem",
    "ConsolidatedEntry",
]
