"""Unit tests for ingredient scaling and cost estimation."""

import pytest

from familymeals.normalize import round_amount, round_cost, scale_amount
from familymeals.plan.meals import generate_meal_from_recipe
from familymeals.plan.pricing import (
    DEFAULT_UNIT_COST,
    INGREDIENT_COSTS,
    StaticPriceTable,
    estimate_ingredient_cost,
)

# =============================================================================
# Rounding
# =============================================================================


class TestRounding:
    """Tests for half-up rounding of amounts and costs."""

    def test_amount_half_rounds_up(self):
        assert round_amount(0.25) == 0.3
        assert round_amount(0.05) == 0.1

    def test_amount_one_decimal(self):
        assert round_amount(1.125) == 1.1
        assert round_amount(4.0) == 4.0

    def test_cost_half_cent_rounds_up(self):
        assert round_cost(2.675) == 2.68
        assert round_cost(0.125) == 0.13

    def test_cost_float_noise(self):
        assert round_cost(0.1 * 3) == 0.3

    def test_scale_amount(self):
        assert scale_amount(2, 8 / 4) == 4.0
        assert scale_amount(1.5, 3 / 4) == 1.1


# =============================================================================
# Pricing
# =============================================================================


class TestStaticPriceTable:
    """Tests for exact-name unit cost lookup."""

    @pytest.mark.parametrize(
        "name, amount, expected",
        [
            ("Milk", 2, 0.5),
            ("Chicken breast", 1.5, 5.25),
            ("Salmon fillets", 1.5, 18.0),
            ("Garlic", 3, 0.3),
        ],
    )
    def test_known_ingredients(self, name, amount, expected):
        prices = StaticPriceTable()
        assert estimate_ingredient_cost(name, amount, prices) == expected
        assert expected == round(INGREDIENT_COSTS[name] * amount, 2)

    def test_unknown_ingredient_uses_default(self):
        prices = StaticPriceTable()
        assert DEFAULT_UNIT_COST == 1.0
        assert estimate_ingredient_cost("Dragon fruit", 2.5, prices) == 2.5

    def test_lookup_is_case_sensitive(self):
        """Test lookup is an exact match on the catalog name."""
        prices = StaticPriceTable()
        assert prices.unit_cost("milk") == DEFAULT_UNIT_COST
        assert prices.unit_cost("Milk") == 0.25

    def test_custom_table_and_default(self):
        prices = StaticPriceTable({"Rice": 0.4, "Water": 0.0}, default_cost=2.0)
        assert prices.unit_cost("Rice") == 0.4
        assert prices.unit_cost("Beans") == 2.0
        assert prices.unit_cost("Water") == 2.0
        assert "Rice" in prices


# =============================================================================
# Meal generation
# =============================================================================


class TestGenerateMealFromRecipe:
    """Tests for building a day's meal from a recipe."""

    def test_scales_clean_multiple_exactly(self, make_recipe):
        recipe = make_recipe(
            servings=4,
            ingredients=[{"name": "Milk", "amount": 2, "unit": "cups", "category": "dairy"}],
        )
        meal = generate_meal_from_recipe(recipe, day=1, family_size=8)

        assert meal.ingredients[0].amount == 4.0
        assert meal.servings == 8

    def test_fractional_scale(self, make_recipe):
        recipe = make_recipe(
            servings=8,
            ingredients=[
                {"name": "Apple cider vinegar", "amount": 0.25, "unit": "cup",
                 "category": "condiments"},
                {"name": "Chicken breasts", "amount": 3, "unit": "lbs",
                 "category": "meat_seafood"},
            ],
        )
        meal = generate_meal_from_recipe(recipe, day=2, family_size=3)

        # 0.25 * 3/8 = 0.09375 -> 0.1; 3 * 3/8 = 1.125 -> 1.1
        assert [ing.amount for ing in meal.ingredients] == [0.1, 1.1]
        assert meal.ingredients[1].estimated_cost == round_cost(3.5 * 1.1)

    def test_cost_uses_rounded_amount(self, make_recipe):
        recipe = make_recipe(
            servings=4,
            ingredients=[{"name": "Mystery", "amount": 1.5, "unit": "jar",
                          "category": "pantry"}],
        )
        meal = generate_meal_from_recipe(recipe, day=1, family_size=3)

        # 1.125 rounds to 1.1 before pricing
        assert meal.ingredients[0].estimated_cost == 1.1

    def test_meal_cost_is_sum_of_lines(self, make_recipe):
        recipe = make_recipe(
            servings=4,
            ingredients=[
                {"name": "Milk", "amount": 2, "unit": "cups", "category": "dairy"},
                {"name": "Eggs", "amount": 4, "unit": "whole", "category": "dairy"},
                {"name": "Mystery", "amount": 1.5, "unit": "jar", "category": "pantry"},
            ],
        )
        meal = generate_meal_from_recipe(recipe, day=1, family_size=4)

        assert [ing.estimated_cost for ing in meal.ingredients] == [0.5, 1.0, 1.5]
        assert meal.estimated_cost == 3.0

    def test_time_does_not_scale(self, make_recipe):
        recipe = make_recipe(prep_time=15, cook_time=25, servings=2)
        meal = generate_meal_from_recipe(recipe, day=1, family_size=10)

        assert meal.prep_time == 15
        assert meal.cook_time == 25
        assert meal.total_time == 40

    def test_copies_recipe_fields(self, make_recipe):
        recipe = make_recipe(
            id="tacos",
            name="Tacos",
            category="family_favorite",
            tags=["interactive"],
            kid_friendly_tips=["Build your own"],
            leftover_ideas=["Taco salad"],
        )
        meal = generate_meal_from_recipe(recipe, day=3, family_size=4)

        assert meal.day == 3
        assert meal.recipe_id == "tacos"
        assert meal.name == "Tacos"
        assert meal.category == "family_favorite"
        assert meal.tags == ["interactive"]
        assert meal.kid_friendly_tips == ["Build your own"]
        assert meal.leftover_ideas == ["Taco salad"]
        assert meal.instructions == list(recipe.instructions)

    def test_fresh_ids(self, make_recipe):
        recipe = make_recipe()
        first = generate_meal_from_recipe(recipe, day=1, family_size=4)
        second = generate_meal_from_recipe(recipe, day=1, family_size=4)
        assert first.id != second.id

    def test_injected_prices_and_ids(self, make_recipe, sequential_ids):
        recipe = make_recipe(
            ingredients=[{"name": "Milk", "amount": 1, "unit": "cups", "category": "dairy"}]
        )
        meal = generate_meal_from_recipe(
            recipe,
            day=1,
            family_size=4,
            prices=StaticPriceTable({"Milk": 3.0}),
            id_factory=sequential_ids,
        )

        assert meal.id == "meal-1"
        assert meal.estimated_cost == 3.0
