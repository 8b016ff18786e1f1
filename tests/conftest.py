"""Pytest configuration and shared fixtures."""

import itertools
import random

import pytest

from familymeals.catalog import RecipeCatalog
from familymeals.schemas import (
    GeneratedMeal,
    MealPlanInput,
    RecipeTemplate,
    ScaledIngredient,
)

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow running")


# =============================================================================
# Profile Fixtures
# =============================================================================


@pytest.fixture
def make_profile():
    """Factory for household profiles with permissive defaults."""

    def _make(**overrides) -> MealPlanInput:
        data = {
            "picky_eater_level": "none",
            "dietary_restrictions": [],
            "allergies": [],
            "cooking_time_available": 60,
            "cooking_skill_level": "beginner",
            "kitchen_equipment": [],
            "family_size": 4,
            "children": 2,
        }
        data.update(overrides)
        return MealPlanInput(**data)

    return _make


@pytest.fixture
def moderate_family_profile(make_profile):
    """Family of four with two moderately picky kids and an hour to cook."""
    return make_profile(
        picky_eater_level="moderate",
        cooking_time_available=60,
        cooking_skill_level="beginner",
        family_size=4,
        children=2,
    )


# =============================================================================
# Recipe Fixtures
# =============================================================================


@pytest.fixture
def make_recipe():
    """Factory for synthetic recipes that pass any beginner, no-equipment profile."""
    counter = itertools.count(1)

    def _make(**overrides) -> RecipeTemplate:
        n = next(counter)
        data = {
            "id": f"recipe-{n}",
            "name": f"Test Recipe {n}",
            "description": "A recipe for tests",
            "prep_time": 10,
            "cook_time": 20,
            "servings": 4,
            "difficulty": "easy",
            "category": "quick",
            "picky_eater_friendly": ["severe", "moderate", "mild", "none"],
            "dietary_restrictions": ["vegetarian", "gluten_free"],
            "avoid_allergies": ["peanuts", "tree_nuts", "fish"],
            "required_equipment": [],
            "skill_level": ["beginner", "intermediate", "advanced"],
            "ingredients": [
                {"name": "Milk", "amount": 1, "unit": "cups", "category": "dairy"},
            ],
            "instructions": ["Cook it."],
            "why_it_works": "It is a test.",
        }
        data.update(overrides)
        return RecipeTemplate(**data)

    return _make


@pytest.fixture
def make_catalog():
    """Factory for a catalog from synthetic recipes."""

    def _make(*recipes: RecipeTemplate) -> RecipeCatalog:
        return RecipeCatalog(recipes)

    return _make


# =============================================================================
# Meal Fixtures
# =============================================================================


@pytest.fixture
def make_meal():
    """Factory for generated meals with explicit ingredient lines."""

    def _make(day: int, ingredients: list[dict], category: str = "quick") -> GeneratedMeal:
        scaled = [ScaledIngredient(**ing) for ing in ingredients]
        return GeneratedMeal(
            id=f"meal-{day}",
            day=day,
            recipe_id=f"recipe-{day}",
            name=f"Meal {day}",
            description="",
            prep_time=10,
            cook_time=20,
            total_time=30,
            servings=4,
            difficulty="easy",
            category=category,
            ingredients=scaled,
            instructions=["Cook it."],
            why_it_works="",
            estimated_cost=sum(ing.estimated_cost for ing in scaled),
        )

    return _make


# =============================================================================
# Determinism Fixtures
# =============================================================================


@pytest.fixture
def seeded_rng():
    """Seeded random source for reproducible selection."""
    return random.Random(1234)


@pytest.fixture
def sequential_ids():
    """Id factory yielding meal-1, meal-2, ..."""
    counter = itertools.count(1)
    return lambda: f"meal-{next(counter)}"
