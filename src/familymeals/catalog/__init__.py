"""Recipe catalog and suitability filtering."""

from familymeals.catalog.catalog import RecipeCatalog, default_catalog
from familymeals.catalog.filters import (
    FilterCriteria,
    filter_recipes,
    recipe_matches,
    rejection_reason,
)

__all__ = [
    "FilterCriteria",
    "RecipeCatalog",
    "default_catalog",
    "filter_recipes",
    "recipe_matches",
    "rejection_reason",
]
