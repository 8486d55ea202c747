#!/usr/bin/env python3
"""
Exports the ingredient catalog to CSV, or replaces it with the contents of a CSV.
"""

import argparse
import logging

from recipe_vault.constants import DEFAULT_DB_PATH
from recipe_vault.database import CatalogStore, create_schema, get_connection
from recipe_vault.ingredients.catalog_utils import read_catalog_csv, write_catalog_csv

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)


def main():
    parser = argparse.ArgumentParser(
        description="Export or import the ingredient catalog as CSV"
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--export", metavar="CSV", help="Write the catalog to CSV")
    mode.add_argument(
        "--import",
        dest="import_file",
        metavar="CSV",
        help="Replace the catalog with the CSV contents",
    )
    parser.add_argument(
        "--db-path",
        type=str,
        default=str(DEFAULT_DB_PATH),
        help=f"Path to the database file (default: {DEFAULT_DB_PATH})",
    )
    args = parser.parse_args()

    conn = get_connection(args.db_path)
    try:
        create_schema(conn)
        store = CatalogStore(conn)
        if args.export:
            catalog = store.load()
            write_catalog_csv(catalog, args.export)
            print(f"Exported {len(catalog)} ingredients to {args.export}")
        else:
            catalog = read_catalog_csv(args.import_file)
            store.save(catalog)
            print(f"Imported {len(catalog)} ingredients from {args.import_file}")
    finally:
        conn.close()


if __name__ == "__main__":
    main()
