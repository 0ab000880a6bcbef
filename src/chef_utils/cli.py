"""Command-line tools for scaling recipes and building shopping lists."""

import argparse
import logging
from typing import List, Optional

from tqdm.auto import tqdm

from chef_utils.ingredients import ShoppingItem, scale_ingredients
from chef_utils.recipes import load_recipe
from chef_utils.shopping import consolidate, consolidated_dataframe

logger = logging.getLogger(__name__)


def positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chef-utils",
        description="Scale recipe ingredients and consolidate shopping lists",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    scale_parser = subparsers.add_parser(
        "scale", help="Scale one recipe to a new number of servings"
    )
    scale_parser.add_argument(
        "recipe",
        type=str,
        help="Recipe file (JSON, or text with one ingredient per line)",
    )
    scale_parser.add_argument(
        "--servings",
        type=positive_int,
        required=True,
        help="Number of servings to scale to",
    )
    scale_parser.add_argument(
        "--original",
        type=positive_int,
        default=None,
        help="Servings the recipe was written for (defaults to the recipe's own count)",
    )

    consolidate_parser = subparsers.add_parser(
        "consolidate", help="Merge the ingredients of several recipes"
    )
    consolidate_parser.add_argument(
        "recipes",
        type=str,
        nargs="+",
        help="Recipe files to combine",
    )
    consolidate_parser.add_argument(
        "--servings",
        type=positive_int,
        default=None,
        help="Scale every recipe that declares its servings to this count first",
    )
    consolidate_parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write the consolidated list to this CSV file instead of printing it",
    )
    return parser


def run_scale(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    try:
        recipe = load_recipe(args.recipe)
    except (OSError, ValueError) as e:
        parser.error(f"could not read recipe: {e}")

    original = args.original or recipe.servings
    if original is None:
        parser.error("--original is required for recipes without a servings count")

    for line in scale_ingredients(recipe.ingredients, original, args.servings):
        print(line)
    return 0


def run_consolidate(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    items: List[ShoppingItem] = []
    for path in tqdm(args.recipes, desc="Reading recipes", disable=len(args.recipes) < 2):
        try:
            recipe = load_recipe(path)
        except (OSError, ValueError) as e:
            parser.error(f"could not read recipe: {e}")

        lines = recipe.ingredients
        if args.servings is not None:
            if recipe.servings is None:
                logger.warning(f"{recipe.name} has no servings count; using it unscaled")
            else:
                lines = scale_ingredients(lines, recipe.servings, args.servings)

        items.extend(
            ShoppingItem(ingredient_line=line, recipe_name=recipe.name, recipe_id=path)
            for line in lines
        )

    entries = consolidate(items)

    if args.output:
        consolidated_dataframe(entries).to_csv(args.output, index=False)
        print(f"Wrote {len(entries)} items from {len(args.recipes)} recipes to {args.output}")
        return 0

    for entry in entries:
        print(f"{entry.combined_text} ({', '.join(entry.recipes)})")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``chef-utils`` command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if args.command == "scale":
        return run_scale(args, parser)
    return run_consolidate(args, parser)


if __name__ == "__main__":
    raise SystemExit(main())
