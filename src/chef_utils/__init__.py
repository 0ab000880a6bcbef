"""Chef Utils - Utilities for recipe ingredient scaling and shopping lists."""

__version__ = "0.1.0"

from . import ingredients, recipes, shopping

__all__ = ["ingredients", "recipes", "shopping"]
