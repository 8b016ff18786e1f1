"""Recipe suitability filtering."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from familymeals.schemas import (
    CookingSkillLevel,
    MealPlanInput,
    PickyEaterLevel,
    RecipeTemplate,
)


@dataclass(frozen=True)
class FilterCriteria:
    """Household constraints a recipe must satisfy."""

    picky_eater_level: PickyEaterLevel
    skill_level: CookingSkillLevel
    max_cook_time: int
    dietary_restrictions: frozenset[str] = field(default_factory=frozenset)
    allergies: frozenset[str] = field(default_factory=frozenset)
    available_equipment: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_input(cls, profile: MealPlanInput) -> "FilterCriteria":
        return cls(
            picky_eater_level=profile.picky_eater_level,
            skill_level=profile.cooking_skill_level,
            max_cook_time=profile.cooking_time_available,
            dietary_restrictions=frozenset(profile.dietary_restrictions),
            allergies=frozenset(profile.allergies),
            available_equipment=frozenset(profile.kitchen_equipment),
        )


def rejection_reason(recipe: RecipeTemplate, criteria: FilterCriteria) -> str | None:
    """
    Return why a recipe is unsuitable, or None if it passes every rule.

    Rules are strict: a recipe must suit the picky eater level and cooking
    skill, satisfy every requested diet, avoid every allergen, fit the time
    budget (prep + cook), and need only equipment the kitchen has.
    """
    if criteria.picky_eater_level not in recipe.picky_eater_friendly:
        return "picky_eater_level"

    if not criteria.dietary_restrictions <= recipe.dietary_restrictions:
        return "dietary_restrictions"

    if not criteria.allergies <= recipe.avoid_allergies:
        return "allergies"

    if recipe.total_time > criteria.max_cook_time:
        return "cooking_time"

    if criteria.skill_level not in recipe.skill_level:
        return "skill_level"

    if not recipe.required_equipment <= criteria.available_equipment:
        return "equipment"

    return None


def recipe_matches(recipe: RecipeTemplate, criteria: FilterCriteria) -> bool:
    """Check if a recipe satisfies all household constraints."""
    return rejection_reason(recipe, criteria) is None


def filter_recipes(
    recipes: Iterable[RecipeTemplate],
    criteria: FilterCriteria,
) -> list[RecipeTemplate]:
    """Keep the recipes that satisfy every constraint, in catalog order."""
    return [recipe for recipe in recipes if recipe_matches(recipe, criteria)]
