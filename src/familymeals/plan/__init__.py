"""Meal plan selection, costing and grocery list generation."""

from familymeals.plan.generator import (
    MealPlanError,
    MealPlanGenerator,
    NoSuitableRecipesError,
    generate_meal_plan,
)
from familymeals.plan.meals import generate_meal_from_recipe
from familymeals.plan.pricing import (
    DEFAULT_UNIT_COST,
    INGREDIENT_COSTS,
    PriceSource,
    StaticPriceTable,
    estimate_ingredient_cost,
)
from familymeals.plan.selector import select_diverse_meals
from familymeals.plan.shopping_list import (
    STORE_AISLES,
    GroceryListGenerator,
    generate_grocery_list,
)
from familymeals.plan.tips import Tip, TipTextResolver

__all__ = [
    "DEFAULT_UNIT_COST",
    "INGREDIENT_COSTS",
    "STORE_AISLES",
    "GroceryListGenerator",
    "MealPlanError",
    "MealPlanGenerator",
    "NoSuitableRecipesError",
    "PriceSource",
    "StaticPriceTable",
    "Tip",
    "TipTextResolver",
    "estimate_ingredient_cost",
    "generate_grocery_list",
    "generate_meal_from_recipe",
    "generate_meal_plan",
    "select_diverse_meals",
]
