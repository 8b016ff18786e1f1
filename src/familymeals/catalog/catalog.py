"""Read-only recipe catalog."""

import logging
from collections import Counter
from collections.abc import Iterable, Iterator
from functools import lru_cache
from types import MappingProxyType

from familymeals.catalog.filters import FilterCriteria, filter_recipes, rejection_reason
from familymeals.catalog.recipes import RECIPE_DATA
from familymeals.logging_config import get_logger
from familymeals.schemas import MealCategory, RecipeTemplate

logger = get_logger(__name__)


class RecipeCatalog:
    """
    Immutable, ordered collection of recipe templates.

    Built once and handed to the generator; nothing mutates it afterwards.
    """

    def __init__(self, recipes: Iterable[RecipeTemplate]):
        self._recipes: tuple[RecipeTemplate, ...] = tuple(recipes)
        by_id: dict[str, RecipeTemplate] = {}
        for recipe in self._recipes:
            if recipe.id in by_id:
                raise ValueError(f"Duplicate recipe id in catalog: {recipe.id}")
            by_id[recipe.id] = recipe
        self._by_id = MappingProxyType(by_id)

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> "RecipeCatalog":
        """Build a catalog from plain recipe dicts (snake_case or camelCase keys)."""
        return cls(RecipeTemplate.model_validate(record) for record in records)

    def __iter__(self) -> Iterator[RecipeTemplate]:
        return iter(self._recipes)

    def __len__(self) -> int:
        return len(self._recipes)

    def __contains__(self, recipe_id: object) -> bool:
        return recipe_id in self._by_id

    @property
    def recipes(self) -> tuple[RecipeTemplate, ...]:
        return self._recipes

    def get(self, recipe_id: str) -> RecipeTemplate | None:
        return self._by_id.get(recipe_id)

    def categories(self) -> Counter[MealCategory]:
        """Count recipes per meal category."""
        return Counter(recipe.category for recipe in self._recipes)

    def filter(self, criteria: FilterCriteria) -> list[RecipeTemplate]:
        """Recipes compatible with the given household constraints."""
        candidates = filter_recipes(self._recipes, criteria)

        if logger.isEnabledFor(logging.DEBUG):
            rejected = Counter(
                reason
                for recipe in self._recipes
                if (reason := rejection_reason(recipe, criteria)) is not None
            )
            logger.debug(
                f"Filtered catalog: {len(candidates)}/{len(self._recipes)} recipes kept, "
                f"rejections by rule: {dict(rejected)}"
            )

        return candidates


@lru_cache
def default_catalog() -> RecipeCatalog:
    """The curated catalog, loaded once per process."""
    catalog = RecipeCatalog.from_records(RECIPE_DATA)
    logger.debug(f"Loaded recipe catalog with {len(catalog)} recipes")
    return catalog
