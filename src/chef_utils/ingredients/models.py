import dataclasses
from fractions import Fraction
from typing import Optional, Tuple


@dataclasses.dataclass(frozen=True)
class ParsedQuantity:
    raw_text: str
    quantity: Optional[Fraction]
    remainder: str  # includes the whitespace that separated it from the quantity

    @property
    def has_quantity(self) -> bool:
        return self.quantity is not None


@dataclasses.dataclass(frozen=True)
class ScaledIngredient:
    display_text: str
    scale_applied: bool


@dataclasses.dataclass(frozen=True)
class ShoppingItem:
    """A saved shopping-list line and the recipe it came from."""

    ingredient_line: str
    recipe_name: str
    recipe_id: Optional[str] = None
    checked: bool = False


@dataclasses.dataclass(frozen=True)
class ConsolidatedEntry:
    normalized_key: str
    combined_quantity: Optional[Fraction]
    combined_text: str
    recipes: Tuple[str, ...]
    lines: Tuple[str, ...] = ()
