"""Ingredient catalog and normalization utilities."""

from .catalog import IngredientCatalog
from .models import Ingredient, IngredientCategory, normalize_token, parse_category
from .normalization import IngredientNormalizer, normalize_ingredient

__all__ = [
    "Ingredient",
    "IngredientCategory",
    "IngredientCatalog",
    "IngredientNormalizer",
    "normalize_ingredient",
    "normalize_token",
    "parse_category",
]
