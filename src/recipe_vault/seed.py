"""First-launch population of books, recipes and ingredients."""

import json
import logging
import os
import sqlite3
from typing import Dict, Optional

from recipe_vault.database import CatalogStore, RecipeRepository, transaction
from recipe_vault.ingredients.catalog import IngredientCatalog
from recipe_vault.ingredients.models import parse_category
from recipe_vault.recipes.models import Book, Recipe, SourceType

logger = logging.getLogger(__name__)

SEED_FILE = os.path.join(os.path.dirname(__file__), "data", "seed_data.json")


def load_seed_data(seed_file: str = SEED_FILE) -> dict:
    """Read the bundled seed file."""
    with open(seed_file, "r", encoding="utf-8") as f:
        return json.load(f)


def populate(conn: sqlite3.Connection, seed_file: str = SEED_FILE) -> Dict[str, int]:
    """Insert the sample books, recipes and ingredients.

    Should only be called on an empty database; see populate_if_empty.
    Everything is written in one transaction, so a failure leaves the
    database as it was and populate_if_empty can run again.

    Args:
        conn: Connection with the schema already created.
        seed_file: JSON file with "books", "recipes" and "ingredients" lists.

    Returns:
        Number of books, recipes and ingredients inserted.

    Raises:
        DuplicateNameError: If the seed file lists an ingredient twice.
    """
    logger.info("Populating seed data...")
    data = load_seed_data(seed_file)
    repository = RecipeRepository(conn)
    store = CatalogStore(conn)

    catalog = store.load()
    for entry in data["ingredients"]:
        catalog.add(
            entry["name"],
            category=parse_category(entry.get("category")),
            aliases=entry.get("aliases", []),
        )

    books = {}
    recipe_count = 0
    with transaction(conn) as cur:
        for entry in data["books"]:
            book = Book(title=entry["title"], author=entry.get("author"))
            repository.write_book(cur, book)
            books[entry["key"]] = book

        for entry in data["recipes"]:
            fields = dict(entry)
            book_key: Optional[str] = fields.pop("book", None)
            fields["source_type"] = SourceType(fields.get("source_type", "manual"))
            if book_key is not None:
                fields["book_id"] = books[book_key].id
            repository.write_recipe(cur, Recipe(**fields))
            recipe_count += 1

        store.write_catalog(cur, catalog)

    counts = {
        "books": len(books),
        "recipes": recipe_count,
        "ingredients": len(data["ingredients"]),
    }
    logger.info(
        f"Seed data populated: {counts['recipes']} recipes, {counts['books']} books, "
        f"{counts['ingredients']} ingredients."
    )
    return counts


def populate_if_empty(conn: sqlite3.Connection, seed_file: str = SEED_FILE) -> bool:
    """Run populate only when no recipes and no ingredients are stored.

    Returns:
        True if seed data was inserted.
    """
    catalog: IngredientCatalog = CatalogStore(conn).load()
    if not RecipeRepository(conn).is_empty() or len(catalog) > 0:
        logger.info("Database already has data, skipping seed population")
        return False
    populate(conn, seed_file)
    return True
