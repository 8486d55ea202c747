"""Database utility functions for the recipe vault."""

import contextlib
import datetime
import json
import logging
import pathlib
import sqlite3
from typing import Generator, List, Optional, Sequence, Union

logger = logging.getLogger(__name__)


def get_connection(db_path: Union[str, pathlib.Path]) -> sqlite3.Connection:
    """Get a SQLite database connection with foreign keys enabled.

    Rows are returned as ``sqlite3.Row`` so columns can be read by name.

    Args:
        db_path: Path to the SQLite database file, or ":memory:"

    Returns:
        SQLite connection with foreign keys enabled
    """
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextlib.contextmanager
def transaction(conn: sqlite3.Connection) -> Generator[sqlite3.Cursor, None, None]:
    """Context manager for database transactions.

    Args:
        conn: SQLite database connection

    Yields:
        Database cursor for executing queries

    Example:
        with transaction(conn) as cur:
            cur.execute("DELETE FROM recipe WHERE id = ?", (recipe_id,))
    """
    cur = conn.cursor()
    try:
        yield cur
        conn.commit()
    except Exception:
        conn.rollback()
        raise


def encode_string_list(values: Sequence[str]) -> str:
    """Encode a list of strings as JSON text for storage."""
    return json.dumps(list(values), ensure_ascii=False)


def decode_string_list(text: Optional[str], context: str = "value") -> List[str]:
    """Decode a JSON text column into a list of strings.

    Malformed values degrade to an empty list so a single bad row never
    blocks the rest of a load.

    Args:
        text: Stored JSON text
        context: Description of the column, used in the warning

    Returns:
        The decoded list, or [] if the text is missing or malformed
    """
    if not text:
        return []
    try:
        values = json.loads(text)
    except (TypeError, ValueError) as e:
        logger.warning(f"Could not decode {context} {text!r}: {e}")
        return []

    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        logger.warning(f"Expected a list of strings for {context}, got {text!r}")
        return []
    return values


def encode_datetime(value: Optional[datetime.datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def decode_datetime(text: Optional[str]) -> Optional[datetime.datetime]:
    if not text:
        return None
    try:
        return datetime.datetime.fromisoformat(text)
    except ValueError:
        logger.warning(f"Could not parse timestamp {text!r}")
        return None
