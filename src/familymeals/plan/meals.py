"""Turn recipe templates into household-sized meals."""

import uuid
from collections.abc import Callable

from familymeals.logging_config import LoggingContext, get_logger
from familymeals.normalize.quantities import round_cost, scale_amount, scale_factor
from familymeals.plan.pricing import PriceSource, StaticPriceTable, estimate_ingredient_cost
from familymeals.schemas import GeneratedMeal, RecipeTemplate, ScaledIngredient

logger = get_logger(__name__)


def new_meal_id() -> str:
    return str(uuid.uuid4())


def scale_ingredients(
    recipe: RecipeTemplate,
    family_size: int,
    prices: PriceSource,
) -> list[ScaledIngredient]:
    """Scale every ingredient to ``family_size`` servings and price it."""
    factor = scale_factor(family_size, recipe.servings)

    scaled: list[ScaledIngredient] = []
    for ingredient in recipe.ingredients:
        amount = scale_amount(ingredient.amount, factor)
        scaled.append(
            ScaledIngredient(
                name=ingredient.name,
                amount=amount,
                unit=ingredient.unit,
                category=ingredient.category,
                estimated_cost=estimate_ingredient_cost(ingredient.name, amount, prices),
            )
        )
    return scaled


def generate_meal_from_recipe(
    recipe: RecipeTemplate,
    day: int,
    family_size: int,
    prices: PriceSource | None = None,
    id_factory: Callable[[], str] = new_meal_id,
) -> GeneratedMeal:
    """
    Build the meal for one day of the plan.

    Ingredient amounts scale with ``family_size / recipe.servings`` and are
    rounded to one decimal; each line is priced from its rounded amount.
    Prep and cook times do not scale.

    Args:
        recipe: Catalog recipe to cook.
        day: 1-based day of the plan.
        family_size: Servings needed.
        prices: Unit price source. Defaults to the static price table.
        id_factory: Produces the meal's unique id.

    Returns:
        GeneratedMeal with scaled, priced ingredients.
    """
    prices = prices or StaticPriceTable()

    with LoggingContext(meal_day=day):
        ingredients = scale_ingredients(recipe, family_size, prices)
        estimated_cost = round_cost(sum(ing.estimated_cost for ing in ingredients))

        logger.debug(
            f"Scaled {recipe.id} from {recipe.servings} to {family_size} servings, "
            f"estimated cost {estimated_cost:.2f}"
        )

    return GeneratedMeal(
        id=id_factory(),
        day=day,
        recipe_id=recipe.id,
        name=recipe.name,
        description=recipe.description,
        prep_time=recipe.prep_time,
        cook_time=recipe.cook_time,
        total_time=recipe.total_time,
        servings=family_size,
        difficulty=recipe.difficulty,
        category=recipe.category,
        ingredients=ingredients,
        instructions=list(recipe.instructions),
        why_it_works=recipe.why_it_works,
        kid_friendly_tips=list(recipe.kid_friendly_tips),
        leftover_ideas=list(recipe.leftover_ideas),
        tags=list(recipe.tags),
        estimated_cost=estimated_cost,
    )
