#!/usr/bin/env python3
"""
Lists the recipes you can make with the ingredients you have on hand.

Example:
    python scripts/what_can_i_make.py spaghetti tomatoes garlic "olive oil" basil
"""

import argparse
import logging

from recipe_vault.constants import DEFAULT_DB_PATH, MINIMUM_MATCH_THRESHOLD
from recipe_vault.database import (
    CatalogStore,
    RecipeRepository,
    create_schema,
    get_connection,
)
from recipe_vault.ingredients import IngredientNormalizer
from recipe_vault.recipes import RecipeMatcher, format_duration

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description="Rank recipes by how many of their ingredients you already have"
    )
    parser.add_argument(
        "pantry",
        nargs="+",
        help="Ingredients on hand; names or aliases, e.g. scallion or 'olive oil'",
    )
    parser.add_argument(
        "--db-path",
        type=str,
        default=str(DEFAULT_DB_PATH),
        help=f"Path to the database file (default: {DEFAULT_DB_PATH})",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=MINIMUM_MATCH_THRESHOLD,
        help=(
            "Minimum fraction of a recipe's ingredients you must have "
            f"(default: {MINIMUM_MATCH_THRESHOLD})"
        ),
    )
    args = parser.parse_args()

    conn = get_connection(args.db_path)
    try:
        create_schema(conn)
        catalog = CatalogStore(conn).load()
        recipes = RecipeRepository(conn).all_recipes()
    finally:
        conn.close()

    normalizer = IngredientNormalizer(catalog)
    pantry = normalizer.normalize_pantry(args.pantry)
    logger.info(f"Pantry: {', '.join(sorted(pantry))}")

    try:
        results = RecipeMatcher(args.threshold).match(pantry, recipes)
    except ValueError as e:
        parser.error(str(e))

    if not results:
        print("No recipes match your pantry. Try adding more ingredients.")
        return

    print(f"\n{len(results)} of {len(recipes)} recipes match:\n")
    for result in results:
        total_time = format_duration(result.recipe.total_time)
        time_note = f" ({total_time})" if total_time else ""
        print(f"  {result.coverage_ratio:6.1%}  {result.recipe.name}{time_note}")
        if result.missing_ingredients:
            print(f"          missing: {', '.join(result.missing_ingredients)}")


if __name__ == "__main__":
    main()
