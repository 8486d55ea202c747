#!/usr/bin/env python3
"""
Creates the recipe vault database and loads the sample data on first launch.
"""

import argparse
import logging

from recipe_vault.constants import DEFAULT_DB_PATH
from recipe_vault.database import create_schema, get_connection
from recipe_vault.seed import populate_if_empty

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)


def main():
    parser = argparse.ArgumentParser(
        description="Create the recipe database and populate it if empty"
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
        if populate_if_empty(conn):
            print(f"Seeded {args.db_path}")
        else:
            print(f"{args.db_path} already has data; nothing to do")
    finally:
        conn.close()


if __name__ == "__main__":
    main()
