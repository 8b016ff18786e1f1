"""Unit tests for category-aware meal selection."""

import random

import pytest

from familymeals.plan.selector import select_diverse_meals
from familymeals.schemas import MEAL_CATEGORIES


@pytest.fixture
def two_per_category(make_recipe):
    """Ten candidates, two in each meal category."""
    return [
        make_recipe(id=f"{category}-{n}", category=category)
        for category in MEAL_CATEGORIES
        for n in range(2)
    ]


class TestSelectionCount:
    """Tests for the number of selected meals."""

    @pytest.mark.parametrize("size", [0, 1, 3, 5, 8, 12])
    @pytest.mark.parametrize("count", [0, 1, 4, 5, 7])
    def test_length_is_min_of_count_and_candidates(self, make_recipe, size, count):
        categories = list(MEAL_CATEGORIES)
        candidates = [make_recipe(category=categories[i % 5]) for i in range(size)]

        picks = select_diverse_meals(candidates, count, random.Random(size * 31 + count))

        assert len(picks) == min(count, size)

    def test_empty_candidates(self):
        assert select_diverse_meals([], 5) == []

    def test_few_candidates_returned_in_order(self, make_recipe):
        candidates = [make_recipe(id="c"), make_recipe(id="a"), make_recipe(id="b")]
        assert [r.id for r in select_diverse_meals(candidates, 5)] == ["c", "a", "b"]

    def test_no_duplicates(self, two_per_category, seeded_rng):
        picks = select_diverse_meals(two_per_category, 8, seeded_rng)
        assert len({r.id for r in picks}) == 8


class TestCategoryCoverage:
    """Tests for the one-per-category first pass."""

    def test_one_per_category_when_all_present(self, two_per_category):
        for seed in range(50):
            picks = select_diverse_meals(two_per_category, 5, random.Random(seed))
            assert sorted(r.category for r in picks) == sorted(MEAL_CATEGORIES)

    def test_first_pass_follows_category_order(self, two_per_category):
        picks = select_diverse_meals(two_per_category, 5, random.Random(3))
        assert [r.category for r in picks] == list(MEAL_CATEGORIES)

    def test_categories_distinct_before_repeats(self, make_recipe):
        """Test sparse categories are each covered once before random fill."""
        candidates = (
            [make_recipe(category="quick") for _ in range(4)]
            + [make_recipe(category="one_pot") for _ in range(4)]
            + [make_recipe(category="family_favorite")]
        )
        for seed in range(25):
            picks = select_diverse_meals(candidates, 5, random.Random(seed))
            assert [r.category for r in picks[:3]] == ["quick", "one_pot", "family_favorite"]

    def test_small_count_stops_early(self, two_per_category, seeded_rng):
        picks = select_diverse_meals(two_per_category, 2, seeded_rng)
        assert [r.category for r in picks] == ["quick", "batch_cook"]


class TestRandomness:
    """Tests for the injectable random source."""

    def test_same_seed_same_selection(self, two_per_category):
        first = select_diverse_meals(two_per_category, 7, random.Random(99))
        second = select_diverse_meals(two_per_category, 7, random.Random(99))
        assert [r.id for r in first] == [r.id for r in second]

    def test_selection_varies_without_seed(self, make_recipe):
        candidates = [make_recipe(category="quick") for _ in range(20)]
        outcomes = {
            tuple(r.id for r in select_diverse_meals(candidates, 3)) for _ in range(30)
        }
        assert len(outcomes) > 1
