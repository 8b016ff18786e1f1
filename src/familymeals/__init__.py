"""Family meal plan generator."""

from familymeals.catalog import FilterCriteria, RecipeCatalog, default_catalog, filter_recipes
from familymeals.plan import MealPlanGenerator, NoSuitableRecipesError, generate_meal_plan
from familymeals.schemas import MealPlanInput, MealPlanResult

__version__ = "0.1.0"

__all__ = [
    "FilterCriteria",
    "MealPlanGenerator",
    "MealPlanInput",
    "MealPlanResult",
    "NoSuitableRecipesError",
    "RecipeCatalog",
    "default_catalog",
    "filter_recipes",
    "generate_meal_plan",
]
