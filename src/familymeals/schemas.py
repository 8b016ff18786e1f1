"""Data schemas for meal plan generation.

Attributes are snake_case in Python and camelCase on the wire, so payloads
built by the front end validate directly and ``to_payload`` dumps them back.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

PickyEaterLevel = Literal["severe", "moderate", "mild", "none"]
CookingSkillLevel = Literal["beginner", "intermediate", "advanced"]
Difficulty = Literal["easy", "medium", "hard"]
MealCategory = Literal["quick", "batch_cook", "slow_cooker", "one_pot", "family_favorite"]
GroceryCategory = Literal[
    "produce",
    "meat_seafood",
    "dairy",
    "bakery",
    "pantry",
    "frozen",
    "canned",
    "condiments",
    "spices",
    "beverages",
]
DietaryRestriction = Literal[
    "vegetarian",
    "vegan",
    "gluten_free",
    "dairy_free",
    "nut_free",
    "egg_free",
    "soy_free",
    "halal",
    "kosher",
    "low_carb",
    "keto",
]
Allergy = Literal[
    "peanuts",
    "tree_nuts",
    "milk",
    "eggs",
    "wheat",
    "soy",
    "fish",
    "shellfish",
    "sesame",
]
KitchenEquipment = Literal[
    "slow_cooker",
    "instant_pot",
    "air_fryer",
    "food_processor",
    "blender",
    "stand_mixer",
    "rice_cooker",
    "grill",
]

# Diversity order used when picking one recipe per category
MEAL_CATEGORIES: tuple[MealCategory, ...] = (
    "quick",
    "batch_cook",
    "slow_cooker",
    "one_pot",
    "family_favorite",
)

GROCERY_CATEGORIES: tuple[GroceryCategory, ...] = (
    "produce",
    "meat_seafood",
    "dairy",
    "bakery",
    "pantry",
    "frozen",
    "canned",
    "condiments",
    "spices",
    "beverages",
)


class CamelModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """Dump to a JSON-ready dict keyed the way the front end expects."""
        return self.model_dump(mode="json", by_alias=True)


# =============================================================================
# Catalog
# =============================================================================


class Ingredient(CamelModel):
    """Ingredient line as written in a recipe."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    name: str
    amount: float
    unit: str
    category: GroceryCategory


class RecipeTemplate(CamelModel):
    """Curated catalog recipe with suitability metadata."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    name: str
    description: str
    prep_time: int = Field(ge=0)
    cook_time: int = Field(ge=0)
    servings: int = Field(gt=0)
    difficulty: Difficulty
    category: MealCategory

    # Suitability
    picky_eater_friendly: frozenset[PickyEaterLevel]
    dietary_restrictions: frozenset[DietaryRestriction] = frozenset()
    avoid_allergies: frozenset[Allergy] = frozenset()
    required_equipment: frozenset[KitchenEquipment] = frozenset()
    skill_level: frozenset[CookingSkillLevel]

    ingredients: tuple[Ingredient, ...]
    instructions: tuple[str, ...]

    why_it_works: str
    kid_friendly_tips: tuple[str, ...] = ()
    leftover_ideas: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()

    # Informational, costs are recomputed from unit prices
    base_cost: float = 0.0

    @property
    def total_time(self) -> int:
        return self.prep_time + self.cook_time


# =============================================================================
# Input
# =============================================================================


class MealPlanInput(CamelModel):
    """
    Household profile collected by the meal plan form.

    Diet, allergy and equipment tags are free strings. A tag no recipe
    declares, or a negative time budget, leaves no candidates and surfaces
    as NoSuitableRecipesError from the generator.
    """

    picky_eater_level: PickyEaterLevel
    dietary_restrictions: list[str] = Field(default_factory=list)
    allergies: list[str] = Field(default_factory=list)
    cooking_time_available: int = Field(description="Max prep+cook minutes per meal")
    cooking_skill_level: CookingSkillLevel
    kitchen_equipment: list[str] = Field(default_factory=list)
    family_size: int = Field(ge=1, description="Servings needed per meal")
    children: int = Field(0, ge=0)
    adults: int = Field(0, ge=0)
    children_ages: list[int] = Field(default_factory=list)


# =============================================================================
# Output
# =============================================================================


class ScaledIngredient(Ingredient):
    """Ingredient scaled to the household with its estimated cost."""

    estimated_cost: float


class GeneratedMeal(CamelModel):
    """One day of the plan."""

    id: str
    day: int = Field(ge=1)
    recipe_id: str
    name: str
    description: str
    prep_time: int
    cook_time: int
    total_time: int
    servings: int
    difficulty: Difficulty
    category: MealCategory
    ingredients: list[ScaledIngredient]
    instructions: list[str]
    why_it_works: str
    kid_friendly_tips: list[str] = Field(default_factory=list)
    leftover_ideas: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    estimated_cost: float


class GroceryItem(CamelModel):
    """Consolidated shopping list line."""

    name: str
    amount: float
    unit: str
    category: GroceryCategory
    estimated_cost: float
    used_in_meals: list[int] = Field(default_factory=list)
    optional: bool = False


class AisleSection(CamelModel):
    """Grocery store aisle with the items to pick up there."""

    aisle: str
    items: list[GroceryItem]


class GroceryList(CamelModel):
    """Shopping list for the whole plan."""

    items: list[GroceryItem]
    total_estimated_cost: float
    organized_by_category: dict[GroceryCategory, list[GroceryItem]]
    organized_by_store: list[AisleSection]


class AppliedFilters(CamelModel):
    """Constraints that were applied when picking recipes."""

    dietary_restrictions: list[str]
    allergies: list[str]
    picky_eater_level: PickyEaterLevel
    max_cooking_time: int
    cooking_skill_level: CookingSkillLevel
    kitchen_equipment: list[str]


class MealPlanResult(CamelModel):
    """Generated plan with grocery list, summary and tips."""

    session_id: str
    meals: list[GeneratedMeal]
    grocery_list: GroceryList
    total_prep_time: int
    total_estimated_cost: float
    average_cost_per_meal: float
    average_time_per_meal: float
    prep_ahead_tips: list[str]
    time_saving_tips: list[str]
    budget_tips: list[str]
    picky_eater_tips: list[str]
    applied_filters: AppliedFilters
