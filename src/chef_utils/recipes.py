"""Recipe file loading."""

import dataclasses
import json
import pathlib
from typing import List, Optional, Union


@dataclasses.dataclass
class Recipe:
    """Dataclass for holding a recipe's ingredient list."""

    name: str
    ingredients: List[str]
    servings: Optional[int] = None


def _read_text_recipe(path: pathlib.Path) -> Recipe:
    ingredients = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                ingredients.append(line)
    return Recipe(name=path.stem, ingredients=ingredients)


def _read_json_recipe(path: pathlib.Path) -> Recipe:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict) or not isinstance(data.get("ingredients"), list):
        raise ValueError(f"{path}: expected an object with an 'ingredients' list")

    servings = data.get("servings")
    if servings is not None and (isinstance(servings, bool) or not isinstance(servings, int)):
        raise ValueError(f"{path}: 'servings' must be an integer, got {servings!r}")

    return Recipe(
        name=str(data.get("name") or path.stem),
        ingredients=[str(line) for line in data["ingredients"] if str(line).strip()],
        servings=servings,
    )


def load_recipe(path: Union[str, pathlib.Path]) -> Recipe:
    """Load a recipe from a JSON or plain-text file.

    JSON files hold an object such as
    ``{"name": "Pancakes", "servings": 4, "ingredients": ["2 cups flour"]}``.
    Any other file is read as one ingredient per line, skipping blank lines
    and ``#`` comments, and named after the file.

    Args:
        path: Path to the recipe file.

    Returns:
        The parsed Recipe.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If a JSON file is malformed or has the wrong shape.
    """
    path = pathlib.Path(path)
    if path.suffix.lower() == ".json":
        return _read_json_recipe(path)
    return _read_text_recipe(path)
