"""Ingredient normalization utilities."""

from typing import FrozenSet, Iterable, List

from recipe_vault.ingredients.catalog import IngredientCatalog
from recipe_vault.ingredients.models import normalize_token


def normalize_ingredient(raw: str, catalog: IngredientCatalog) -> str:
    """Convert a free-text ingredient mention to its canonical name.

    Unknown ingredients pass through lowercased and trimmed rather than
    failing, so recipes can be written before the catalog is complete.

    Args:
        raw: Ingredient name as typed by a user or taken from a recipe.
        catalog: Catalog used for name and alias lookup.

    Returns:
        The canonical name, the cleaned input if unknown, or "" for blank input.

    Examples:
        >>> normalize_ingredient("Scallion", catalog)
        "spring onion"
        >>> normalize_ingredient(" Unicorn Horn ", catalog)
        "unicorn horn"
    """
    token = normalize_token(raw)
    if not token:
        return ""

    ingredient = catalog.lookup(token)
    if ingredient is not None:
        return ingredient.name
    return token


class IngredientNormalizer:
    """Normalizes ingredient mentions against a single catalog."""

    def __init__(self, catalog: IngredientCatalog):
        self.catalog = catalog

    def normalize(self, raw: str) -> str:
        return normalize_ingredient(raw, self.catalog)

    def normalize_all(self, raws: Iterable[str]) -> List[str]:
        """Normalize a list of mentions for storage as normalized ingredients.

        Empty results are dropped and only the first occurrence of each
        canonical name is kept, so "parmigiano" and "parmesan" collapse.
        """
        seen = set()
        normalized = []
        for raw in raws:
            name = self.normalize(raw)
            if name and name not in seen:
                seen.add(name)
                normalized.append(name)
        return normalized

    def normalize_pantry(self, raws: Iterable[str]) -> FrozenSet[str]:
        """Normalize on-hand ingredients into a pantry set for matching."""
        return frozenset(self.normalize_all(raws))
