#!/usr/bin/env python3
"""
Re-runs every recipe's normalized ingredients through the current catalog.

Useful after adding aliases: a recipe that stored "scallion" before the alias
existed is rewritten to use "spring onion".
"""

import argparse
import logging

from tqdm.auto import tqdm

from recipe_vault.constants import DEFAULT_DB_PATH
from recipe_vault.database import (
    CatalogStore,
    RecipeRepository,
    create_schema,
    get_connection,
)
from recipe_vault.ingredients import IngredientNormalizer

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description="Canonicalize stored normalized ingredients against the catalog"
    )
    parser.add_argument(
        "--db-path",
        type=str,
        default=str(DEFAULT_DB_PATH),
        help=f"Path to the database file (default: {DEFAULT_DB_PATH})",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report changes without writing them",
    )
    args = parser.parse_args()

    conn = get_connection(args.db_path)
    try:
        create_schema(conn)
        normalizer = IngredientNormalizer(CatalogStore(conn).load())
        repository = RecipeRepository(conn)

        changed = 0
        for recipe in tqdm(repository.all_recipes(), desc="Recipes"):
            normalized = normalizer.normalize_all(recipe.normalized_ingredients)
            if normalized == recipe.normalized_ingredients:
                continue
            changed += 1
            logger.info(
                f"{recipe.name}: {recipe.normalized_ingredients} -> {normalized}"
            )
            if not args.dry_run:
                recipe.normalized_ingredients = normalized
                repository.update_recipe(recipe)
    finally:
        conn.close()

    action = "Would update" if args.dry_run else "Updated"
    print(f"{action} {changed} recipes")


if __name__ == "__main__":
    main()
