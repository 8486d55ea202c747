"""SQLite-backed storage for recipes and books."""

import dataclasses
import datetime
import logging
import sqlite3
from typing import List, Optional

from recipe_vault.exceptions import NotFoundError
from recipe_vault.recipes import search
from recipe_vault.recipes.models import Book, Recipe, SourceType

from .utils import (
    decode_datetime,
    decode_string_list,
    encode_datetime,
    encode_string_list,
    transaction,
)

logger = logging.getLogger(__name__)

_RECIPE_COLUMNS = (
    "id",
    "name",
    "description",
    "recipe_ingredient",
    "normalized_ingredients",
    "recipe_instructions",
    "recipe_category",
    "recipe_cuisine",
    "recipe_yield",
    "prep_time",
    "cook_time",
    "total_time",
    "keywords",
    "author",
    "date_published",
    "source_type",
    "source_url",
    "source_page_number",
    "notes",
    "is_favorite",
    "book_id",
    "created_at",
    "updated_at",
)

_LIST_COLUMNS = {
    "recipe_ingredient",
    "normalized_ingredients",
    "recipe_instructions",
    "keywords",
}


def _recipe_to_row(recipe: Recipe) -> tuple:
    values = []
    for column in _RECIPE_COLUMNS:
        value = getattr(recipe, column)
        if column in _LIST_COLUMNS:
            value = encode_string_list(value)
        elif column == "source_type":
            value = value.value
        elif column == "is_favorite":
            value = int(value)
        elif column == "date_published":
            value = value.isoformat() if value is not None else None
        elif column in ("created_at", "updated_at"):
            value = encode_datetime(value)
        values.append(value)
    return tuple(values)


def _decode_source_type(value: Optional[str]) -> SourceType:
    try:
        return SourceType(value)
    except ValueError:
        logger.warning(f"Unknown source type {value!r}, using manual")
        return SourceType.MANUAL


def _decode_date(value: Optional[str]) -> Optional[datetime.date]:
    if not value:
        return None
    try:
        return datetime.date.fromisoformat(value)
    except ValueError:
        logger.warning(f"Could not parse publication date {value!r}")
        return None


def _row_to_recipe(row: sqlite3.Row) -> Recipe:
    fields = {}
    for column in _RECIPE_COLUMNS:
        value = row[column]
        if column in _LIST_COLUMNS:
            value = decode_string_list(value, f"{column} of recipe {row['id']}")
        elif column == "source_type":
            value = _decode_source_type(value)
        elif column == "is_favorite":
            value = bool(value)
        elif column == "date_published":
            value = _decode_date(value)
        elif column in ("created_at", "updated_at"):
            value = decode_datetime(value)
            if value is None:
                continue
        fields[column] = value
    return Recipe(**fields)


def _row_to_book(row: sqlite3.Row) -> Book:
    fields = {"id": row["id"], "title": row["title"], "author": row["author"]}
    for column in ("created_at", "updated_at"):
        value = decode_datetime(row[column])
        if value is not None:
            fields[column] = value
    return Book(**fields)


class RecipeRepository:
    """CRUD and query operations for recipes and books.

    Every read builds new Recipe objects, so the lists returned are stable
    snapshots that later writes do not change.

    Attributes:
        conn (sqlite3.Connection): Connection with the schema already created.
    """

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def _fetch_recipes(self, where: str = "", params: tuple = ()) -> List[Recipe]:
        cur = self.conn.execute(
            f"SELECT {', '.join(_RECIPE_COLUMNS)} FROM recipe {where}", params
        )
        return [_row_to_recipe(row) for row in cur.fetchall()]

    def write_recipe(self, cur: sqlite3.Cursor, recipe: Recipe) -> None:
        """Insert a recipe using the caller's cursor, without committing."""
        placeholders = ", ".join("?" for _ in _RECIPE_COLUMNS)
        cur.execute(
            f"INSERT INTO recipe({', '.join(_RECIPE_COLUMNS)}) "
            f"VALUES ({placeholders})",
            _recipe_to_row(recipe),
        )

    def add_recipe(self, recipe: Recipe) -> Recipe:
        """Insert a new recipe into the store."""
        with transaction(self.conn) as cur:
            self.write_recipe(cur, recipe)
        logger.debug(f"Added recipe '{recipe.name}' ({recipe.id})")
        return recipe

    def update_recipe(self, recipe: Recipe) -> Recipe:
        """Write every field of an existing recipe.

        Raises:
            NotFoundError: If the recipe is not in the store.
        """
        updated_at = datetime.datetime.now(datetime.timezone.utc)
        assignments = ", ".join(f"{c} = ?" for c in _RECIPE_COLUMNS[1:])
        row = _recipe_to_row(dataclasses.replace(recipe, updated_at=updated_at))
        with transaction(self.conn) as cur:
            cur.execute(
                f"UPDATE recipe SET {assignments} WHERE id = ?", row[1:] + (row[0],)
            )
            if cur.rowcount == 0:
                raise NotFoundError("recipe", recipe.id)
        recipe.updated_at = updated_at
        return recipe

    def get_recipe(self, recipe_id: str) -> Optional[Recipe]:
        recipes = self._fetch_recipes("WHERE id = ?", (recipe_id,))
        return recipes[0] if recipes else None

    def delete_recipe(self, recipe_id: str) -> None:
        """Delete a recipe from the store.

        Raises:
            NotFoundError: If no recipe has that id.
        """
        with transaction(self.conn) as cur:
            cur.execute("DELETE FROM recipe WHERE id = ?", (recipe_id,))
            if cur.rowcount == 0:
                raise NotFoundError("recipe", recipe_id)
        logger.debug(f"Deleted recipe {recipe_id}")

    def all_recipes(self, cuisine: Optional[str] = None) -> List[Recipe]:
        """Fetch all recipes sorted by name, optionally filtered by cuisine.

        Args:
            cuisine: Case-insensitive text the recipe cuisine must contain.
        """
        recipes = search.sort_by_name(self._fetch_recipes())
        return search.filter_by_cuisine(recipes, cuisine)

    def search_recipes(self, query: str) -> List[Recipe]:
        """Search recipes by name, keyword or normalized ingredient."""
        return search.search_recipes(self.all_recipes(), query)

    def recipes_in_book(self, book_id: str) -> List[Recipe]:
        return search.sort_by_name(self._fetch_recipes("WHERE book_id = ?", (book_id,)))

    def count_recipes(self) -> int:
        return self.conn.execute("SELECT COUNT(*) FROM recipe").fetchone()[0]

    def is_empty(self) -> bool:
        return self.count_recipes() == 0

    def write_book(self, cur: sqlite3.Cursor, book: Book) -> None:
        """Insert a book using the caller's cursor, without committing."""
        cur.execute(
            "INSERT INTO book(id, title, author, created_at, updated_at) "
            "VALUES (?, ?, ?, ?, ?)",
            (
                book.id,
                book.title,
                book.author,
                encode_datetime(book.created_at),
                encode_datetime(book.updated_at),
            ),
        )

    def add_book(self, book: Book) -> Book:
        """Insert a new book into the store."""
        with transaction(self.conn) as cur:
            self.write_book(cur, book)
        return book

    def get_book(self, book_id: str) -> Optional[Book]:
        row = self.conn.execute(
            "SELECT id, title, author, created_at, updated_at FROM book WHERE id = ?",
            (book_id,),
        ).fetchone()
        return _row_to_book(row) if row else None

    def all_books(self) -> List[Book]:
        """Fetch all books sorted by title."""
        cur = self.conn.execute(
            "SELECT id, title, author, created_at, updated_at FROM book"
        )
        return sorted(
            (_row_to_book(row) for row in cur.fetchall()),
            key=lambda b: (b.title.lower(), b.id),
        )

    def delete_book(self, book_id: str) -> None:
        """Delete a book; its recipes stay in the store without a book.

        Raises:
            NotFoundError: If no book has that id.
        """
        with transaction(self.conn) as cur:
            cur.execute("DELETE FROM book WHERE id = ?", (book_id,))
            if cur.rowcount == 0:
                raise NotFoundError("book", book_id)
