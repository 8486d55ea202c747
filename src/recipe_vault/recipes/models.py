import dataclasses
import datetime
import enum
import uuid
from typing import List, Optional


class SourceType(enum.Enum):
    """How a recipe was added to the collection."""

    BOOK = "book"
    URL = "url"
    MANUAL = "manual"


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


@dataclasses.dataclass
class Book:
    """A cookbook that can contain multiple recipes."""

    title: str
    author: Optional[str] = None
    id: str = dataclasses.field(default_factory=_new_id)
    created_at: datetime.datetime = dataclasses.field(default_factory=_now)
    updated_at: datetime.datetime = dataclasses.field(default_factory=_now)


@dataclasses.dataclass
class Recipe:
    """A recipe aligned with the schema.org/Recipe vocabulary.

    ``recipe_ingredient`` holds the display lines (e.g. "400g spaghetti") and
    ``normalized_ingredients`` the canonical names used for matching
    (e.g. "spaghetti"). The two lists are maintained independently.
    Durations are ISO 8601 strings such as "PT30M".
    """

    name: str
    description: Optional[str] = None
    recipe_ingredient: List[str] = dataclasses.field(default_factory=list)
    normalized_ingredients: List[str] = dataclasses.field(default_factory=list)
    recipe_instructions: List[str] = dataclasses.field(default_factory=list)
    recipe_category: Optional[str] = None
    recipe_cuisine: Optional[str] = None
    recipe_yield: Optional[str] = None
    prep_time: Optional[str] = None
    cook_time: Optional[str] = None
    total_time: Optional[str] = None
    keywords: List[str] = dataclasses.field(default_factory=list)
    author: Optional[str] = None
    date_published: Optional[datetime.date] = None
    source_type: SourceType = SourceType.MANUAL
    source_url: Optional[str] = None
    source_page_number: Optional[int] = None
    notes: Optional[str] = None
    is_favorite: bool = False
    book_id: Optional[str] = None
    id: str = dataclasses.field(default_factory=_new_id)
    created_at: datetime.datetime = dataclasses.field(default_factory=_now)
    updated_at: datetime.datetime = dataclasses.field(default_factory=_now)
