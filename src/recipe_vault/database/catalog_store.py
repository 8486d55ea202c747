"""Load and save the ingredient catalog in SQLite."""

import logging
import sqlite3
from typing import Optional

from recipe_vault.exceptions import DuplicateIdError, DuplicateNameError
from recipe_vault.ingredients.catalog import IngredientCatalog
from recipe_vault.ingredients.models import Ingredient, parse_category

from .utils import (
    decode_datetime,
    decode_string_list,
    encode_datetime,
    encode_string_list,
    transaction,
)

logger = logging.getLogger(__name__)


class CatalogStore:
    """Persists IngredientCatalog entries in the ``ingredient`` table.

    Attributes:
        conn (sqlite3.Connection): Connection with the schema already created.
    """

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def _row_to_ingredient(self, row: sqlite3.Row) -> Optional[Ingredient]:
        fields = {
            "id": row["id"],
            "name": row["name"] or "",
            "category": parse_category(row["category"]),
            "aliases": decode_string_list(
                row["aliases"], f"aliases of ingredient {row['id']}"
            ),
        }
        for column in ("created_at", "updated_at"):
            value = decode_datetime(row[column])
            if value is not None:
                fields[column] = value

        try:
            return Ingredient(**fields)
        except ValueError as e:
            logger.warning(f"Skipping ingredient row {row['id']}: {e}")
            return None

    def load(self) -> IngredientCatalog:
        """Read every stored ingredient into a new catalog.

        Rows are read in insertion order. Corrupt rows are skipped or
        degraded with a warning instead of aborting the load.
        """
        cur = self.conn.execute(
            "SELECT id, name, category, aliases, created_at, updated_at "
            "FROM ingredient ORDER BY rowid"
        )
        catalog = IngredientCatalog()
        for row in cur.fetchall():
            ingredient = self._row_to_ingredient(row)
            if ingredient is None:
                continue
            try:
                catalog.insert(ingredient)
            except (DuplicateNameError, DuplicateIdError) as e:
                logger.warning(f"Skipping ingredient row {row['id']}: {e}")

        logger.info(f"Loaded {len(catalog)} ingredients from the catalog store")
        return catalog

    def save(self, catalog: IngredientCatalog) -> None:
        """Write the catalog, replacing the stored entries.

        Rows are rewritten in catalog order inside a single transaction, so a
        later load iterates the entries in the same order.
        """
        with transaction(self.conn) as cur:
            count = self.write_catalog(cur, catalog)
        logger.info(f"Saved {count} ingredients to the catalog store")

    def write_catalog(self, cur: sqlite3.Cursor, catalog: IngredientCatalog) -> int:
        """Replace the stored entries using the caller's cursor, without committing.

        Returns:
            Number of ingredients written.
        """
        ingredients = list(catalog)
        cur.execute("DELETE FROM ingredient")
        cur.executemany(
            "INSERT INTO ingredient"
            "(id, name, category, aliases, created_at, updated_at) "
            "VALUES (?, ?, ?, ?, ?, ?)",
            [
                (
                    ingredient.id,
                    ingredient.name,
                    ingredient.category.value if ingredient.category else None,
                    encode_string_list(ingredient.aliases),
                    encode_datetime(ingredient.created_at),
                    encode_datetime(ingredient.updated_at),
                )
                for ingredient in ingredients
            ],
        )
        return len(ingredients)
