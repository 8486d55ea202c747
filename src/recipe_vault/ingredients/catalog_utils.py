"""CSV import and export for the ingredient catalog."""

import logging
import pathlib
from typing import Union

import pandas as pd

from recipe_vault.database.utils import decode_string_list, encode_string_list
from recipe_vault.exceptions import DuplicateIdError, DuplicateNameError

from .catalog import IngredientCatalog
from .models import Ingredient, parse_category

logger = logging.getLogger(__name__)

CSV_COLUMNS = ["id", "name", "category", "aliases"]


def catalog_to_dataframe(catalog: IngredientCatalog) -> pd.DataFrame:
    """Build a DataFrame with one row per ingredient, in catalog order.

    The aliases column holds JSON text, matching the database encoding.
    """
    data = [
        {
            "id": ingredient.id,
            "name": ingredient.name,
            "category": ingredient.category.value if ingredient.category else "",
            "aliases": encode_string_list(ingredient.aliases),
        }
        for ingredient in catalog
    ]
    return pd.DataFrame(data, columns=CSV_COLUMNS)


def write_catalog_csv(
    catalog: IngredientCatalog, output_file: Union[str, pathlib.Path]
) -> None:
    """Write the catalog to a CSV file.

    Args:
        catalog: Catalog to export
        output_file: Path to output CSV file
    """
    df = catalog_to_dataframe(catalog)
    df.to_csv(output_file, index=False)
    logger.info(f"Wrote {len(df)} ingredients to {output_file}")


def read_catalog_csv(csv_file: Union[str, pathlib.Path]) -> IngredientCatalog:
    """Load a catalog from a CSV file written by write_catalog_csv.

    The id column is optional; rows without one get a new id. Rows with a
    blank or duplicate name or a repeated id are skipped, and malformed
    aliases degrade to an empty list, each with a warning.

    Args:
        csv_file: Path to the CSV file

    Returns:
        A new IngredientCatalog with the rows in file order
    """
    df = pd.read_csv(csv_file, dtype=str, keep_default_na=False)
    if "name" not in df.columns:
        raise ValueError(f"{csv_file} has no 'name' column")

    catalog = IngredientCatalog()
    for index, row in df.iterrows():
        fields = {
            "name": row["name"],
            "category": parse_category(row.get("category")),
            "aliases": decode_string_list(
                row.get("aliases"), f"aliases on row {index + 2}"
            ),
        }
        if row.get("id"):
            fields["id"] = row["id"]

        try:
            catalog.insert(Ingredient(**fields))
        except (ValueError, DuplicateNameError, DuplicateIdError) as e:
            logger.warning(f"Skipping row {index + 2} of {csv_file}: {e}")

    logger.info(f"Loaded {len(catalog)} ingredients from {csv_file}")
    return catalog
