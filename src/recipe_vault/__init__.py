"""Recipe Vault - ingredient normalization and pantry matching for recipe collections."""

__version__ = "0.1.0"

from . import database, ingredients, recipes
from .exceptions import (
    DuplicateIdError,
    DuplicateNameError,
    NotFoundError,
    RecipeVaultError,
)

__all__ = [
    "database",
    "ingredients",
    "recipes",
    "RecipeVaultError",
    "DuplicateIdError",
    "DuplicateNameError",
    "NotFoundError",
]
