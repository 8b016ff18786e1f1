"""Ingredient unit pricing."""

from collections.abc import Mapping
from typing import Protocol

from familymeals.normalize.quantities import round_cost

DEFAULT_UNIT_COST = 1.0

# Estimated cost per recipe unit, in dollars. Keys match catalog names exactly.
INGREDIENT_COSTS: dict[str, float] = {
    # Proteins
    "Chicken breast": 3.5,
    "Chicken breasts": 3.5,
    "Chicken thighs": 2.5,
    "Rotisserie chicken": 2.0,
    "Ground beef": 4.0,
    "Ground beef or turkey": 3.5,
    "Salmon fillets": 12.0,
    "White fish fillets": 8.0,
    # Dairy
    "Milk": 0.25,
    "Eggs": 0.25,
    "Cheddar cheese": 0.5,
    "Shredded cheese": 0.4,
    "Mozzarella cheese": 0.4,
    "Parmesan cheese": 0.6,
    "Ricotta cheese": 1.25,
    "Butter": 0.3,
    "Sour cream": 0.15,
    "Heavy cream": 0.4,
    # Produce
    "Potatoes": 0.5,
    "Sweet potatoes": 0.75,
    "Broccoli florets": 0.4,
    "Cherry tomatoes": 0.3,
    "Tomatoes": 0.5,
    "Lettuce": 0.2,
    "Zucchini": 0.75,
    "Bell pepper": 1.0,
    "Onion": 0.5,
    "Garlic": 0.1,
    "Carrots": 0.25,
    "Celery": 0.2,
    "Avocado": 1.25,
    "Lemon": 0.5,
    "Fruit": 0.5,
    "Coleslaw": 1.5,
    # Pantry
    "Breadcrumbs": 0.15,
    "Panko breadcrumbs": 0.2,
    "Elbow macaroni": 0.1,
    "Penne pasta": 0.1,
    "Egg noodles": 0.2,
    "Lasagna noodles": 0.25,
    "Long grain rice": 0.1,
    "White rice": 0.1,
    "Olive oil": 0.2,
    "Vegetable oil": 0.15,
    "Pancake mix": 0.15,
    "Brown sugar": 0.05,
    # Canned and frozen
    "Butternut squash puree": 1.5,
    "Frozen mixed vegetables": 0.5,
    "Frozen stir-fry vegetables": 0.5,
    "Kidney beans": 0.8,
    "Black beans": 0.8,
    "Diced tomatoes": 0.9,
    "Tomato sauce": 0.8,
    "Marinara sauce": 0.75,
    "Chicken broth": 0.5,
    "Vegetable broth": 0.5,
    "Cream of chicken soup": 1.2,
    # Condiments and sauces
    "BBQ sauce": 0.15,
    "Teriyaki sauce": 0.15,
    "Soy sauce": 0.1,
    "Taco seasoning": 0.5,
    "Salsa": 0.2,
    "Mayonnaise": 0.2,
    "Maple syrup": 0.3,
    "Honey": 0.2,
    "Apple cider vinegar": 0.1,
    # Spices
    "Salt": 0.01,
    "Garlic powder": 0.05,
    "Onion powder": 0.05,
    "Italian seasoning": 0.05,
    "Chili powder": 0.05,
    "Cumin": 0.05,
    "Ginger": 0.05,
    "Sesame seeds": 0.1,
    # Bakery
    "Flour tortillas": 0.3,
    "Hamburger buns": 0.3,
}


class PriceSource(Protocol):
    """Maps an ingredient name to a cost per recipe unit."""

    def unit_cost(self, name: str) -> float: ...


class StaticPriceTable:
    """
    Price source backed by a fixed name -> cost table.

    Lookup is an exact match on the ingredient name as written in the
    catalog. Unknown names cost ``default_cost`` per unit.
    """

    def __init__(
        self,
        costs: Mapping[str, float] | None = None,
        default_cost: float = DEFAULT_UNIT_COST,
    ):
        self.costs = dict(INGREDIENT_COSTS if costs is None else costs)
        self.default_cost = default_cost

    def unit_cost(self, name: str) -> float:
        # Zero-cost entries fall back to the default as well
        return self.costs.get(name) or self.default_cost

    def __contains__(self, name: object) -> bool:
        return name in self.costs


def estimate_ingredient_cost(name: str, amount: float, prices: PriceSource) -> float:
    """Cost of ``amount`` units of an ingredient, rounded to cents."""
    return round_cost(prices.unit_cost(name) * amount)
