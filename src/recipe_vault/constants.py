"""App-wide constants."""

import pathlib

# Minimum ingredient coverage ratio (0.0-1.0) for a recipe to be shown in results.
MINIMUM_MATCH_THRESHOLD = 0.3

DEFAULT_DB_PATH = pathlib.Path("data/recipe_vault.db")
