import dataclasses
import datetime
import enum
import logging
import uuid
from typing import List, Optional

logger = logging.getLogger(__name__)


class IngredientCategory(enum.Enum):
    """Category classification for an ingredient."""

    PROTEIN = "protein"
    VEGETABLE = "vegetable"
    FRUIT = "fruit"
    DAIRY = "dairy"
    GRAIN = "grain"
    PANTRY_STAPLE = "pantryStaple"
    HERB = "herb"
    SPICE = "spice"
    CONDIMENT = "condiment"
    OTHER = "other"


def normalize_token(token: str) -> str:
    """Lowercase and trim a name for exact, case-insensitive comparison.

    Examples:
        >>> normalize_token("  Bell Pepper ")
        "bell pepper"
    """
    return token.strip().lower()


def _now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


@dataclasses.dataclass
class Ingredient:
    """A known ingredient with optional category and aliases for normalization."""

    name: str
    category: Optional[IngredientCategory] = None
    aliases: List[str] = dataclasses.field(default_factory=list)
    id: str = dataclasses.field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime.datetime = dataclasses.field(default_factory=_now)
    updated_at: datetime.datetime = dataclasses.field(default_factory=_now)

    def __post_init__(self):
        self.name = normalize_token(self.name)
        if not self.name:
            raise ValueError("Ingredient name must not be empty")
        self.aliases = list(self.aliases)

    def matches_alias(self, token: str) -> bool:
        """Return True if the normalized token equals one of the aliases."""
        return any(normalize_token(alias) == token for alias in self.aliases)

    def touch(self) -> None:
        self.updated_at = _now()


def parse_category(value: Optional[str]) -> Optional[IngredientCategory]:
    """Map a stored category string to IngredientCategory.

    Unknown values degrade to None with a warning.
    """
    if not value:
        return None
    try:
        return IngredientCategory(value)
    except ValueError:
        logger.warning(f"Unknown ingredient category {value!r}, leaving it unset")
        return None
