"""Rank recipes by how much of each one a pantry already covers."""

import dataclasses
import logging
from typing import AbstractSet, Iterable, List, Optional, Sequence, Tuple

from recipe_vault.constants import MINIMUM_MATCH_THRESHOLD
from recipe_vault.ingredients.models import normalize_token
from recipe_vault.recipes.models import Recipe

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class MatchResult:
    recipe: Recipe
    coverage_ratio: float
    matched_ingredients: Tuple[str, ...]
    missing_ingredients: Tuple[str, ...]

    @property
    def is_complete(self) -> bool:
        return not self.missing_ingredients and bool(self.matched_ingredients)


def _distinct(names: Iterable[str]) -> List[str]:
    seen = set()
    distinct = []
    for name in names:
        key = normalize_token(name)
        if key and key not in seen:
            seen.add(key)
            distinct.append(name)
    return distinct


def _split(
    pantry: AbstractSet[str], normalized_ingredients: Sequence[str]
) -> Tuple[List[str], List[str]]:
    matched, missing = [], []
    for name in _distinct(normalized_ingredients):
        if normalize_token(name) in pantry:
            matched.append(name)
        else:
            missing.append(name)
    return matched, missing


def coverage_ratio(
    pantry: Iterable[str], normalized_ingredients: Sequence[str]
) -> float:
    """Fraction of a recipe's distinct ingredients present in the pantry.

    A recipe with no ingredients has a coverage of 0.0.

    Examples:
        >>> coverage_ratio({"rice", "egg"}, ["rice", "egg", "pea", "carrot"])
        0.5
    """
    pantry_set = frozenset(normalize_token(name) for name in pantry)
    matched, missing = _split(pantry_set, normalized_ingredients)
    total = len(matched) + len(missing)
    if total == 0:
        return 0.0
    return len(matched) / total


def _sort_key(result: MatchResult):
    return (-result.coverage_ratio, result.recipe.name.lower(), result.recipe.id)


class RecipeMatcher:
    """Matches a pantry against recipes using a minimum coverage threshold.

    The matcher performs no catalog lookups: pantry entries and recipe
    ingredients are expected to already be canonical names, compared
    case-insensitively after trimming.

    Attributes:
        threshold (float): Default minimum coverage ratio for inclusion.
    """

    def __init__(self, threshold: float = MINIMUM_MATCH_THRESHOLD):
        self.threshold = _check_threshold(threshold)

    def match(
        self,
        pantry: Iterable[str],
        recipes: Iterable[Recipe],
        threshold: Optional[float] = None,
    ) -> List[MatchResult]:
        """Find recipes whose coverage meets the threshold.

        Args:
            pantry: Canonical names of ingredients on hand.
            recipes: Candidate recipes. The sequence is copied before use.
            threshold: Overrides the matcher's default threshold.

        Returns:
            Match results sorted by coverage (highest first), then recipe name
            (case-insensitive), then recipe id. Recipes below the threshold and
            recipes without normalized ingredients are left out.

        Raises:
            ValueError: If the threshold is outside [0.0, 1.0].
        """
        if threshold is None:
            threshold = self.threshold
        else:
            threshold = _check_threshold(threshold)

        pantry_set = frozenset(
            token for token in (normalize_token(name) for name in pantry) if token
        )
        candidates = list(recipes)

        results = []
        for recipe in candidates:
            matched, missing = _split(pantry_set, list(recipe.normalized_ingredients))
            total = len(matched) + len(missing)
            if total == 0:
                continue

            ratio = len(matched) / total
            if ratio >= threshold:
                results.append(
                    MatchResult(
                        recipe=recipe,
                        coverage_ratio=ratio,
                        matched_ingredients=tuple(matched),
                        missing_ingredients=tuple(missing),
                    )
                )

        results.sort(key=_sort_key)
        logger.debug(
            f"Matched {len(results)} of {len(candidates)} recipes "
            f"against {len(pantry_set)} pantry items (threshold {threshold})"
        )
        return results


def _check_threshold(threshold: float) -> float:
    threshold = float(threshold)
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"Match threshold must be between 0 and 1, got {threshold}")
    return threshold


def match_recipes(
    pantry: Iterable[str],
    recipes: Iterable[Recipe],
    threshold: float = MINIMUM_MATCH_THRESHOLD,
) -> List[MatchResult]:
    """Convenience wrapper around RecipeMatcher.match."""
    return RecipeMatcher(threshold).match(pantry, recipes)
