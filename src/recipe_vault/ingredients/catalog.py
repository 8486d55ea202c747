"""In-memory ingredient catalog with name and alias lookup."""

import contextlib
import logging
import threading
from typing import Dict, Generator, Iterable, Iterator, List, Optional

from recipe_vault.exceptions import DuplicateIdError, DuplicateNameError, NotFoundError
from recipe_vault.ingredients.models import (
    Ingredient,
    IngredientCategory,
    normalize_token,
)

logger = logging.getLogger(__name__)

_UNSET = object()


class _ReadWriteLock:
    """Many concurrent readers or a single writer."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False

    @contextlib.contextmanager
    def read_locked(self) -> Generator[None, None, None]:
        with self._cond:
            while self._writing:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextlib.contextmanager
    def write_locked(self) -> Generator[None, None, None]:
        with self._cond:
            while self._writing or self._readers:
                self._cond.wait()
            self._writing = True
        try:
            yield
        finally:
            with self._cond:
                self._writing = False
                self._cond.notify_all()


class IngredientCatalog:
    """The authoritative mapping from any known name or alias to an Ingredient.

    Entries are kept in insertion order, which is the order used to break
    ties when the same alias appears on more than one entry.

    Attributes:
        _entries (dict): Ingredients keyed by id, in insertion order.
    """

    def __init__(self, ingredients: Iterable[Ingredient] = ()):
        """Initialize the catalog.

        Args:
            ingredients: Existing entries to insert, keeping their ids.

        Raises:
            DuplicateNameError: If two of the given entries share a name.
            DuplicateIdError: If two of the given entries share an id.
        """
        self._entries: Dict[str, Ingredient] = {}
        self._lock = _ReadWriteLock()
        for ingredient in ingredients:
            self.insert(ingredient)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._entries)

    def __iter__(self) -> Iterator[Ingredient]:
        with self._lock.read_locked():
            return iter(list(self._entries.values()))

    def __contains__(self, token: object) -> bool:
        if not isinstance(token, str):
            return False
        return self.lookup(token) is not None

    def _find_by_name(self, name: str) -> Optional[Ingredient]:
        for ingredient in self._entries.values():
            if ingredient.name == name:
                return ingredient
        return None

    def lookup(self, token: str) -> Optional[Ingredient]:
        """Find the ingredient for a name or alias.

        Exact names take precedence over aliases. Among aliases, the first
        entry in catalog order wins. No partial or fuzzy matching is done.

        Args:
            token: Name or alias, in any case and with surrounding whitespace.

        Returns:
            The matching Ingredient, or None if the token is unknown.

        Examples:
            >>> catalog.lookup(" Scallion ").name
            "spring onion"
        """
        normalized = normalize_token(token)
        if not normalized:
            return None

        with self._lock.read_locked():
            ingredient = self._find_by_name(normalized)
            if ingredient is not None:
                return ingredient
            for ingredient in self._entries.values():
                if ingredient.matches_alias(normalized):
                    return ingredient
        return None

    def get(self, ingredient_id: str) -> Optional[Ingredient]:
        with self._lock.read_locked():
            return self._entries.get(ingredient_id)

    def all_ingredients(self) -> List[Ingredient]:
        """Return all ingredients sorted by name."""
        with self._lock.read_locked():
            return sorted(self._entries.values(), key=lambda i: i.name)

    def insert(self, ingredient: Ingredient) -> Ingredient:
        """Add an existing Ingredient, keeping its id.

        Raises:
            DuplicateNameError: If the name is already in the catalog.
            DuplicateIdError: If the id is already in the catalog.
        """
        with self._lock.write_locked():
            if ingredient.id in self._entries:
                raise DuplicateIdError(ingredient.id)
            if self._find_by_name(ingredient.name) is not None:
                raise DuplicateNameError(ingredient.name)
            self._entries[ingredient.id] = ingredient
        return ingredient

    def add(
        self,
        name: str,
        category: Optional[IngredientCategory] = None,
        aliases: Iterable[str] = (),
    ) -> Ingredient:
        """Create a new catalog entry.

        Args:
            name: Canonical name; stored lowercased and trimmed.
            category: Optional category.
            aliases: Alternate names that resolve to this entry.

        Returns:
            The new Ingredient.

        Raises:
            DuplicateNameError: If the normalized name is already in the catalog.
            ValueError: If the name is empty after trimming.
        """
        ingredient = self.insert(
            Ingredient(name=name, category=category, aliases=list(aliases))
        )
        logger.info(f"Added ingredient '{ingredient.name}' ({ingredient.id})")
        return ingredient

    def remove(self, ingredient_id: str) -> Ingredient:
        """Remove an entry from future lookups.

        Recipes store plain names, so nothing else changes.

        Raises:
            NotFoundError: If no entry has that id.
        """
        with self._lock.write_locked():
            ingredient = self._entries.pop(ingredient_id, None)
        if ingredient is None:
            raise NotFoundError("ingredient", ingredient_id)
        logger.info(f"Removed ingredient '{ingredient.name}' ({ingredient_id})")
        return ingredient

    def update(
        self,
        ingredient_id: str,
        name: Optional[str] = None,
        category=_UNSET,
        aliases: Optional[Iterable[str]] = None,
    ) -> Ingredient:
        """Edit an entry's name, category or aliases.

        Pass ``category=None`` to clear the category.

        Raises:
            NotFoundError: If no entry has that id.
            DuplicateNameError: If the new name belongs to another entry.
            ValueError: If the new name is empty after trimming.
        """
        with self._lock.write_locked():
            ingredient = self._entries.get(ingredient_id)
            if ingredient is None:
                raise NotFoundError("ingredient", ingredient_id)

            if name is not None:
                new_name = normalize_token(name)
                if not new_name:
                    raise ValueError("Ingredient name must not be empty")
                existing = self._find_by_name(new_name)
                if existing is not None and existing.id != ingredient_id:
                    raise DuplicateNameError(new_name)
                ingredient.name = new_name
            if category is not _UNSET:
                ingredient.category = category
            if aliases is not None:
                ingredient.aliases = list(aliases)
            ingredient.touch()

        logger.info(f"Updated ingredient '{ingredient.name}' ({ingredient_id})")
        return ingredient

    def add_alias(self, ingredient_id: str, alias: str) -> Ingredient:
        """Append an alias to an entry if it is not already present.

        Raises:
            NotFoundError: If no entry has that id.
        """
        with self._lock.write_locked():
            ingredient = self._entries.get(ingredient_id)
            if ingredient is None:
                raise NotFoundError("ingredient", ingredient_id)
            normalized = normalize_token(alias)
            if normalized and not ingredient.matches_alias(normalized):
                ingredient.aliases.append(alias.strip())
                ingredient.touch()
        return ingredient
