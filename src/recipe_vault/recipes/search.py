"""Recipe search and filter helpers."""

import unicodedata
from typing import Iterable, List, Optional

from recipe_vault.recipes.models import Recipe


def _fold(text: str) -> str:
    """Case- and diacritic-insensitive form of a string."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()


def _contains(haystack: Optional[str], needle: str) -> bool:
    return haystack is not None and needle in _fold(haystack)


def sort_by_name(recipes: Iterable[Recipe]) -> List[Recipe]:
    return sorted(recipes, key=lambda r: (_fold(r.name), r.id))


def filter_by_cuisine(
    recipes: Iterable[Recipe], cuisine: Optional[str] = None
) -> List[Recipe]:
    """Keep recipes whose cuisine contains the given text.

    A None cuisine keeps every recipe.
    """
    if cuisine is None:
        return list(recipes)
    needle = _fold(cuisine)
    return [r for r in recipes if _contains(r.recipe_cuisine, needle)]


def search_recipes(recipes: Iterable[Recipe], query: str) -> List[Recipe]:
    """Find recipes by name, keyword or normalized ingredient.

    Args:
        recipes: Recipes to search.
        query: Free text; a blank query returns every recipe.

    Returns:
        Recipes where the query is a substring of the name, of any keyword or
        of any normalized ingredient, in their original order.

    Examples:
        >>> [r.name for r in search_recipes(recipes, "tahini")]
        ["Hummus from Scratch", "Roasted Cauliflower with Tahini"]
    """
    recipes = list(recipes)
    if not query.strip():
        return recipes

    needle = _fold(query.strip())
    return [
        recipe
        for recipe in recipes
        if _contains(recipe.name, needle)
        or any(_contains(k, needle) for k in recipe.keywords)
        or any(_contains(i, needle) for i in recipe.normalized_ingredients)
    ]
