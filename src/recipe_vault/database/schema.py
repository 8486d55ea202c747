"""Database schema definitions for the recipe vault."""

import sqlite3

DDL = """
CREATE TABLE IF NOT EXISTS ingredient(
    id         TEXT PRIMARY KEY,
    name       TEXT UNIQUE NOT NULL,
    category   TEXT,
    aliases    TEXT NOT NULL DEFAULT '[]',
    created_at TEXT,
    updated_at TEXT
);

CREATE TABLE IF NOT EXISTS book(
    id         TEXT PRIMARY KEY,
    title      TEXT NOT NULL,
    author     TEXT,
    created_at TEXT,
    updated_at TEXT
);

CREATE TABLE IF NOT EXISTS recipe(
    id                     TEXT PRIMARY KEY,
    name                   TEXT NOT NULL,
    description            TEXT,
    recipe_ingredient      TEXT NOT NULL DEFAULT '[]',
    normalized_ingredients TEXT NOT NULL DEFAULT '[]',
    recipe_instructions    TEXT NOT NULL DEFAULT '[]',
    recipe_category        TEXT,
    recipe_cuisine         TEXT,
    recipe_yield           TEXT,
    prep_time              TEXT,
    cook_time              TEXT,
    total_time             TEXT,
    keywords               TEXT NOT NULL DEFAULT '[]',
    author                 TEXT,
    date_published         TEXT,
    source_type            TEXT NOT NULL DEFAULT 'manual',
    source_url             TEXT,
    source_page_number     INTEGER,
    notes                  TEXT,
    is_favorite            INTEGER NOT NULL DEFAULT 0,
    book_id                TEXT,
    created_at             TEXT,
    updated_at             TEXT,
    FOREIGN KEY(book_id) REFERENCES book(id) ON DELETE SET NULL
);

CREATE INDEX IF NOT EXISTS idx_recipe_book ON recipe(book_id);
"""


def create_schema(conn: sqlite3.Connection) -> None:
    """Create the database schema for recipes, books and ingredients.

    Args:
        conn: SQLite database connection
    """
    conn.executescript(DDL)
    conn.execute("PRAGMA foreign_keys = ON")
