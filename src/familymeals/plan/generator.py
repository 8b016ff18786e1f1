"""Weekly meal plan generation."""

import random
from collections.abc import Callable

from familymeals.catalog import FilterCriteria, RecipeCatalog, default_catalog
from familymeals.config import Settings, get_settings
from familymeals.logging_config import LoggingContext, get_logger
from familymeals.plan.meals import generate_meal_from_recipe, new_meal_id
from familymeals.plan.pricing import PriceSource, StaticPriceTable
from familymeals.plan.selector import select_diverse_meals
from familymeals.plan.shopping_list import GroceryListGenerator
from familymeals.plan.tips import (
    TipTextResolver,
    budget_tip_ids,
    cost_per_person_per_meal,
    picky_eater_tip_ids,
    prep_ahead_tip_ids,
    time_saving_tip_ids,
)
from familymeals.schemas import AppliedFilters, MealPlanInput, MealPlanResult

logger = get_logger(__name__)


class MealPlanError(Exception):
    """Base exception for meal plan generation."""


class NoSuitableRecipesError(MealPlanError):
    """Raised when no catalog recipe satisfies the household constraints."""

    def __init__(self, message: str | None = None, criteria: FilterCriteria | None = None):
        super().__init__(
            message
            or "No suitable recipes found. Try relaxing some constraints "
            "(longer cooking time, different skill level, etc.)."
        )
        self.criteria = criteria


class MealPlanGenerator:
    """
    Generates a week of dinners for a household:
    - Filter the catalog by picky eater level, diets, allergies, time, skill and equipment
    - Pick a category-diverse set of recipes
    - Scale and price each recipe for the family
    - Consolidate a grocery list grouped by aisle
    - Add prep-ahead, time-saving, budget and picky eater tips

    Selection is random unless a seeded ``rng`` is passed or
    ``MEALPLAN_SELECTION_SEED`` is set.
    """

    def __init__(
        self,
        catalog: RecipeCatalog | None = None,
        prices: PriceSource | None = None,
        rng: random.Random | None = None,
        id_factory: Callable[[], str] = new_meal_id,
        tip_resolver: TipTextResolver | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or get_settings()
        self.catalog = default_catalog() if catalog is None else catalog
        self.prices = prices or StaticPriceTable(default_cost=self.settings.default_unit_cost)
        self.rng = rng or random.Random(self.settings.selection_seed)
        self.id_factory = id_factory
        self.tip_resolver = tip_resolver or TipTextResolver()
        self.grocery_lists = GroceryListGenerator()

    def generate(
        self,
        profile: MealPlanInput,
        session_id: str,
        meal_count: int | None = None,
    ) -> MealPlanResult:
        """
        Generate a meal plan.

        Args:
            profile: Household constraints and size.
            session_id: Caller correlation id, echoed back unchanged.
            meal_count: Number of dinners. Defaults to ``settings.meals_per_plan``.

        Returns:
            MealPlanResult with meals, grocery list, summary and tips.

        Raises:
            NoSuitableRecipesError: If no recipe satisfies every constraint.
        """
        meal_count = self.settings.meals_per_plan if meal_count is None else meal_count

        with LoggingContext(session_id=session_id):
            logger.info(
                f"Generating meal plan: {meal_count} meals, family of {profile.family_size}, "
                f"picky level {profile.picky_eater_level}"
            )

            criteria = FilterCriteria.from_input(profile)
            candidates = self.catalog.filter(criteria)

            if not candidates:
                logger.warning(f"No suitable recipes for criteria {criteria}")
                raise NoSuitableRecipesError(criteria=criteria)

            selected = select_diverse_meals(candidates, meal_count, self.rng)
            meals = [
                generate_meal_from_recipe(
                    recipe,
                    day,
                    profile.family_size,
                    prices=self.prices,
                    id_factory=self.id_factory,
                )
                for day, recipe in enumerate(selected, start=1)
            ]

            grocery_list = self.grocery_lists.generate(meals)

            total_prep_time = sum(meal.total_time for meal in meals)
            total_estimated_cost = grocery_list.total_estimated_cost
            count = len(meals)

            result = MealPlanResult(
                session_id=session_id,
                meals=meals,
                grocery_list=grocery_list,
                total_prep_time=total_prep_time,
                total_estimated_cost=total_estimated_cost,
                average_cost_per_meal=total_estimated_cost / count if count else 0.0,
                average_time_per_meal=total_prep_time / count if count else 0.0,
                prep_ahead_tips=self.tip_resolver.resolve(prep_ahead_tip_ids(meals)),
                time_saving_tips=self.tip_resolver.resolve(time_saving_tip_ids(profile)),
                budget_tips=self.tip_resolver.resolve(
                    budget_tip_ids(),
                    per_person_per_meal=cost_per_person_per_meal(
                        total_estimated_cost, profile.family_size, count
                    ),
                ),
                picky_eater_tips=self.tip_resolver.resolve(
                    picky_eater_tip_ids(profile.picky_eater_level)
                ),
                applied_filters=AppliedFilters(
                    dietary_restrictions=list(profile.dietary_restrictions),
                    allergies=list(profile.allergies),
                    picky_eater_level=profile.picky_eater_level,
                    max_cooking_time=profile.cooking_time_available,
                    cooking_skill_level=profile.cooking_skill_level,
                    kitchen_equipment=list(profile.kitchen_equipment),
                ),
            )

            logger.info(
                f"Generated meal plan: {count} meals from {len(candidates)} candidates, "
                f"{len(grocery_list.items)} grocery items, total cost: {total_estimated_cost:.2f}"
            )

        return result


def generate_meal_plan(
    profile: MealPlanInput,
    session_id: str,
    rng: random.Random | None = None,
) -> MealPlanResult:
    """Generate a meal plan from the default catalog and price table."""
    return MealPlanGenerator(rng=rng).generate(profile, session_id)
