"""Unit tests for plan tips."""

import pytest

from familymeals.plan.tips import (
    GENERAL_PICKY_EATER_TIPS,
    TIP_TEXT,
    Tip,
    TipTextResolver,
    budget_tip_ids,
    cost_per_person_per_meal,
    picky_eater_tip_ids,
    prep_ahead_tip_ids,
    time_saving_tip_ids,
)


def test_every_tip_has_text():
    assert set(TIP_TEXT) == set(Tip)


def resolve_budget_tips(total_cost, family_size, meal_count):
    return TipTextResolver().resolve(
        budget_tip_ids(),
        per_person_per_meal=cost_per_person_per_meal(total_cost, family_size, meal_count),
    )


class TestPrepAheadTips:
    def test_generic_tips_only(self, make_meal):
        meals = [make_meal(1, [], category="quick"), make_meal(2, [], category="one_pot")]
        assert prep_ahead_tip_ids(meals) == [
            Tip.CHOP_ON_UNPACK,
            Tip.MARINATE_OVERNIGHT,
            Tip.PREMEASURE_DRY,
        ]

    def test_batch_cook_and_slow_cooker_lead(self, make_meal):
        meals = [
            make_meal(1, [], category="slow_cooker"),
            make_meal(2, [], category="batch_cook"),
            make_meal(3, [], category="batch_cook"),
        ]
        tips = prep_ahead_tip_ids(meals)

        assert tips[:2] == [Tip.BATCH_COOK_SUNDAY, Tip.SLOW_COOKER_NIGHT_BEFORE]
        assert len(tips) == 5

    def test_text(self, make_meal):
        meals = [make_meal(1, [], category="batch_cook")]
        tips = TipTextResolver().resolve(prep_ahead_tip_ids(meals))
        assert tips[0].startswith("Cook your batch cooking meals on Sunday")


class TestTimeSavingTips:
    def test_adults_only_no_equipment(self, make_profile):
        profile = make_profile(children=0)
        assert time_saving_tip_ids(profile) == [
            Tip.FROZEN_VEGETABLES,
            Tip.DOUBLE_BATCH_GRAINS,
            Tip.EYE_LEVEL_STAPLES,
        ]

    def test_equipment_and_children(self, make_profile):
        profile = make_profile(kitchen_equipment=["air_fryer", "instant_pot"], children=1)
        assert time_saving_tip_ids(profile)[3:] == [
            Tip.INSTANT_POT_RICE,
            Tip.AIR_FRYER_REHEAT,
            Tip.KIDS_HELP,
        ]

    def test_unrelated_equipment_ignored(self, make_profile):
        profile = make_profile(kitchen_equipment=["grill", "blender"], children=0)
        assert len(time_saving_tip_ids(profile)) == 3


class TestBudgetTips:
    def test_cost_per_person_per_meal(self):
        assert cost_per_person_per_meal(50.0, 4, 5) == 2.5

    def test_cost_per_person_zero_meals(self):
        assert cost_per_person_per_meal(0.0, 4, 0) == 0.0

    def test_first_tip_reports_two_decimals(self):
        tips = resolve_budget_tips(40.0, 3, 5)

        assert tips[0] == (
            "Your cost per person per meal is approximately $2.67 - much less than dining out!"
        )
        assert len(tips) == len(budget_tip_ids()) == 5

    def test_divides_by_actual_meal_count(self):
        assert "$5.00" in resolve_budget_tips(40.0, 4, 2)[0]


class TestPickyEaterTips:
    def test_severe(self):
        assert picky_eater_tip_ids("severe") == [
            Tip.ONE_NEW_FOOD,
            Tip.NO_PRESSURE,
            Tip.REPEATED_EXPOSURE,
            Tip.MODEL_EATING,
        ]

    def test_moderate_starts_with_one_bite_rule(self):
        tips = TipTextResolver().resolve(picky_eater_tip_ids("moderate"))

        assert len(tips) == 4
        assert tips[0] == 'Use the "one bite rule" - just one taste is a victory.'

    @pytest.mark.parametrize("level", ["mild", "none"])
    def test_general_tips(self, level):
        assert picky_eater_tip_ids(level) == list(GENERAL_PICKY_EATER_TIPS)


class TestTipTextResolver:
    def test_custom_wording(self):
        resolver = TipTextResolver({Tip.CHECK_PANTRY: "Look in the cupboard first."})
        assert resolver.resolve([Tip.CHECK_PANTRY]) == ["Look in the cupboard first."]

    def test_placeholder_filled_from_context(self):
        resolver = TipTextResolver({Tip.COST_PER_PERSON: "About ${per_person_per_meal:.1f}"})
        assert resolver.resolve([Tip.COST_PER_PERSON], per_person_per_meal=3.14) == ["About $3.1"]

    def test_unknown_tip_raises(self):
        resolver = TipTextResolver({})
        with pytest.raises(KeyError):
            resolver.resolve([Tip.STORE_BRANDS])

    def test_tip_ids_are_strings(self):
        assert Tip.KIDS_HELP == "time_saving.kids_help"
