"""Database utilities for the recipe vault."""

from .catalog_store import CatalogStore
from .repository import RecipeRepository
from .schema import DDL, create_schema
from .utils import (
    decode_string_list,
    encode_string_list,
    get_connection,
    transaction,
)

__all__ = [
    "DDL",
    "create_schema",
    "get_connection",
    "transaction",
    "encode_string_list",
    "decode_string_list",
    "CatalogStore",
    "RecipeRepository",
]
