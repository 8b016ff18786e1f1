"""Grocery list consolidation from generated meals."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from familymeals.logging_config import get_logger
from familymeals.normalize.quantities import round_amount, round_cost
from familymeals.schemas import (
    GROCERY_CATEGORIES,
    AisleSection,
    GeneratedMeal,
    GroceryCategory,
    GroceryItem,
    GroceryList,
)

logger = get_logger(__name__)

# Typical store walk, front to back
STORE_AISLES: tuple[tuple[str, GroceryCategory], ...] = (
    ("Produce", "produce"),
    ("Meat & Seafood", "meat_seafood"),
    ("Dairy", "dairy"),
    ("Frozen Foods", "frozen"),
    ("Bakery", "bakery"),
    ("Canned Goods", "canned"),
    ("Pantry/Dry Goods", "pantry"),
    ("Condiments & Sauces", "condiments"),
    ("Spices", "spices"),
    ("Beverages", "beverages"),
)


def consolidation_key(name: str, unit: str) -> str:
    """Ingredients merge only when the name (case-insensitive) and unit both match."""
    return f"{name.lower()}_{unit}"


@dataclass
class _PendingItem:
    """Running totals for one grocery line while meals are merged."""

    name: str
    unit: str
    category: GroceryCategory
    amount: float = 0.0
    estimated_cost: float = 0.0
    used_in_meals: list[int] = field(default_factory=list)

    def to_item(self) -> GroceryItem:
        return GroceryItem(
            name=self.name,
            amount=round_amount(self.amount),
            unit=self.unit,
            category=self.category,
            estimated_cost=round_cost(self.estimated_cost),
            used_in_meals=self.used_in_meals,
            optional=False,
        )


class GroceryListGenerator:
    """
    Builds a shopping list from the week's meals with:
    - Quantity and cost aggregation across meals, keyed by name + unit
    - Per-category buckets for every grocery category
    - Aisle sections in store walking order, empty aisles omitted
    """

    def __init__(self, aisles: tuple[tuple[str, GroceryCategory], ...] = STORE_AISLES):
        self.aisles = aisles

    def generate(self, meals: Iterable[GeneratedMeal]) -> GroceryList:
        items = self.consolidate(meals)

        organized_by_category = self.organize_by_category(items)
        organized_by_store = self.organize_by_store(organized_by_category)
        total = round_cost(sum(item.estimated_cost for item in items))

        logger.debug(
            f"Generated grocery list: {len(items)} items in "
            f"{len(organized_by_store)} aisles, total cost: {total:.2f}"
        )

        return GroceryList(
            items=items,
            total_estimated_cost=total,
            organized_by_category=organized_by_category,
            organized_by_store=organized_by_store,
        )

    def consolidate(self, meals: Iterable[GeneratedMeal]) -> list[GroceryItem]:
        """Merge ingredient lines across meals, in first-seen order."""
        pending: dict[str, _PendingItem] = {}

        for meal in meals:
            for ingredient in meal.ingredients:
                key = consolidation_key(ingredient.name, ingredient.unit)

                if key not in pending:
                    pending[key] = _PendingItem(
                        name=ingredient.name,
                        unit=ingredient.unit,
                        category=ingredient.category,
                    )

                # Repeats inside one meal add up and record the day again
                entry = pending[key]
                entry.amount += ingredient.amount
                entry.estimated_cost += ingredient.estimated_cost
                entry.used_in_meals.append(meal.day)

        return [entry.to_item() for entry in pending.values()]

    def organize_by_category(
        self,
        items: Iterable[GroceryItem],
    ) -> dict[GroceryCategory, list[GroceryItem]]:
        by_category: dict[GroceryCategory, list[GroceryItem]] = {
            category: [] for category in GROCERY_CATEGORIES
        }
        for item in items:
            by_category[item.category].append(item)
        return by_category

    def organize_by_store(
        self,
        by_category: dict[GroceryCategory, list[GroceryItem]],
    ) -> list[AisleSection]:
        return [
            AisleSection(aisle=aisle, items=by_category[category])
            for aisle, category in self.aisles
            if by_category.get(category)
        ]


def generate_grocery_list(meals: Iterable[GeneratedMeal]) -> GroceryList:
    """Consolidate the meals' ingredients into a grocery list."""
    return GroceryListGenerator().generate(meals)
