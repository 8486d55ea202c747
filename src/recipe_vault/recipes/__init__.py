"""Recipe models, search and pantry matching."""

from .durations import format_duration
from .matching import MatchResult, RecipeMatcher, coverage_ratio, match_recipes
from .models import Book, Recipe, SourceType
from .search import filter_by_cuisine, search_recipes

__all__ = [
    "Book",
    "Recipe",
    "SourceType",
    "MatchResult",
    "RecipeMatcher",
    "coverage_ratio",
    "match_recipes",
    "filter_by_cuisine",
    "search_recipes",
    "format_duration",
]
