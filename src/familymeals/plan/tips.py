"""Contextual tips for a generated plan.

Deciding which tips apply is kept apart from their wording: the ``*_tip_ids``
functions return ``Tip`` identifiers, and ``TipTextResolver`` turns them into
display strings.
"""

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from familymeals.schemas import GeneratedMeal, MealPlanInput, PickyEaterLevel


class Tip(str, Enum):
    # Prep ahead
    BATCH_COOK_SUNDAY = "prep_ahead.batch_cook_sunday"
    SLOW_COOKER_NIGHT_BEFORE = "prep_ahead.slow_cooker_night_before"
    CHOP_ON_UNPACK = "prep_ahead.chop_on_unpack"
    MARINATE_OVERNIGHT = "prep_ahead.marinate_overnight"
    PREMEASURE_DRY = "prep_ahead.premeasure_dry"

    # Time saving
    FROZEN_VEGETABLES = "time_saving.frozen_vegetables"
    DOUBLE_BATCH_GRAINS = "time_saving.double_batch_grains"
    EYE_LEVEL_STAPLES = "time_saving.eye_level_staples"
    INSTANT_POT_RICE = "time_saving.instant_pot_rice"
    AIR_FRYER_REHEAT = "time_saving.air_fryer_reheat"
    KIDS_HELP = "time_saving.kids_help"

    # Budget
    COST_PER_PERSON = "budget.cost_per_person"
    BUY_PROTEIN_ON_SALE = "budget.buy_protein_on_sale"
    STORE_BRANDS = "budget.store_brands"
    CHECK_PANTRY = "budget.check_pantry"
    FROZEN_PRODUCE = "budget.frozen_produce"

    # Picky eaters
    ONE_NEW_FOOD = "picky.one_new_food"
    NO_PRESSURE = "picky.no_pressure"
    REPEATED_EXPOSURE = "picky.repeated_exposure"
    MODEL_EATING = "picky.model_eating"
    ONE_BITE_RULE = "picky.one_bite_rule"
    INTERACTIVE_MEALS = "picky.interactive_meals"
    PAIR_WITH_FAVORITES = "picky.pair_with_favorites"
    CELEBRATE_WINS = "picky.celebrate_wins"
    INVOLVE_IN_PLANNING = "picky.involve_in_planning"
    FOOD_ADVENTURES = "picky.food_adventures"
    DESCRIPTIVE_LANGUAGE = "picky.descriptive_language"


TIP_TEXT: dict[Tip, str] = {
    Tip.BATCH_COOK_SUNDAY: "Cook your batch cooking meals on Sunday - they make multiple "
    "servings and freeze beautifully.",
    Tip.SLOW_COOKER_NIGHT_BEFORE: "Prep slow cooker meals the night before. Store ingredients "
    "in the slow cooker insert in the fridge, then just turn it on in the morning.",
    Tip.CHOP_ON_UNPACK: "Wash and chop all vegetables when you unpack groceries to save time "
    "during the week.",
    Tip.MARINATE_OVERNIGHT: "Marinate proteins the night before for maximum flavor with "
    "minimal effort.",
    Tip.PREMEASURE_DRY: "Pre-measure dry ingredients and store in labeled containers for "
    "quick access.",
    Tip.FROZEN_VEGETABLES: "Use frozen vegetables - they're pre-washed, pre-chopped, and just "
    "as nutritious.",
    Tip.DOUBLE_BATCH_GRAINS: "Cook double batches of rice, pasta, or grains and refrigerate "
    "half for quick meals later.",
    Tip.EYE_LEVEL_STAPLES: "Keep your most-used ingredients at eye level for faster meal prep.",
    Tip.INSTANT_POT_RICE: "Your Instant Pot can cook rice while you're preparing other parts "
    "of the meal.",
    Tip.AIR_FRYER_REHEAT: "The air fryer is perfect for reheating leftovers - they taste "
    "freshly made!",
    Tip.KIDS_HELP: "Give kids age-appropriate tasks (washing produce, tearing lettuce) to "
    "involve them and save time.",
    Tip.COST_PER_PERSON: "Your cost per person per meal is approximately "
    "${per_person_per_meal:.2f} - much less than dining out!",
    Tip.BUY_PROTEIN_ON_SALE: "Buy proteins on sale and freeze immediately for use later in "
    "the week.",
    Tip.STORE_BRANDS: "Store brands often have identical quality to name brands at 30% less "
    "cost.",
    Tip.CHECK_PANTRY: "Check your pantry before shopping to avoid buying duplicates.",
    Tip.FROZEN_PRODUCE: "Frozen fruits and vegetables are cheaper and reduce waste since you "
    "use only what you need.",
    Tip.ONE_NEW_FOOD: "Start with one new food at a time, presented alongside familiar safe "
    "foods.",
    Tip.NO_PRESSURE: "No pressure rule: Offer new foods without requiring your child to eat "
    "them.",
    Tip.REPEATED_EXPOSURE: "It can take 10-15 exposures before a child accepts a new food - "
    "keep offering!",
    Tip.MODEL_EATING: "Let kids see YOU enjoying the food first to model positive behavior.",
    Tip.ONE_BITE_RULE: 'Use the "one bite rule" - just one taste is a victory.',
    Tip.INTERACTIVE_MEALS: "Make meals interactive - build-your-own formats give kids control "
    "and confidence.",
    Tip.PAIR_WITH_FAVORITES: "Pair new foods with familiar favorites to reduce anxiety.",
    Tip.CELEBRATE_WINS: "Celebrate small wins and focus on progress, not perfection.",
    Tip.INVOLVE_IN_PLANNING: "Involve kids in meal planning - they're more likely to eat what "
    "they helped choose.",
    Tip.FOOD_ADVENTURES: 'Try "food adventures" where the family tries one new recipe '
    "together each week.",
    Tip.DESCRIPTIVE_LANGUAGE: 'Use descriptive language - "crunchy," "sweet," "colorful" - to '
    "build food vocabulary.",
}

PICKY_EATER_TIPS: dict[str, tuple[Tip, ...]] = {
    "severe": (Tip.ONE_NEW_FOOD, Tip.NO_PRESSURE, Tip.REPEATED_EXPOSURE, Tip.MODEL_EATING),
    "moderate": (
        Tip.ONE_BITE_RULE,
        Tip.INTERACTIVE_MEALS,
        Tip.PAIR_WITH_FAVORITES,
        Tip.CELEBRATE_WINS,
    ),
}
GENERAL_PICKY_EATER_TIPS = (Tip.INVOLVE_IN_PLANNING, Tip.FOOD_ADVENTURES, Tip.DESCRIPTIVE_LANGUAGE)


# =============================================================================
# Tip selection
# =============================================================================


def prep_ahead_tip_ids(meals: Iterable[GeneratedMeal]) -> list[Tip]:
    categories = {meal.category for meal in meals}

    tips: list[Tip] = []
    if "batch_cook" in categories:
        tips.append(Tip.BATCH_COOK_SUNDAY)
    if "slow_cooker" in categories:
        tips.append(Tip.SLOW_COOKER_NIGHT_BEFORE)

    tips.extend([Tip.CHOP_ON_UNPACK, Tip.MARINATE_OVERNIGHT, Tip.PREMEASURE_DRY])
    return tips


def time_saving_tip_ids(profile: MealPlanInput) -> list[Tip]:
    tips = [Tip.FROZEN_VEGETABLES, Tip.DOUBLE_BATCH_GRAINS, Tip.EYE_LEVEL_STAPLES]

    if "instant_pot" in profile.kitchen_equipment:
        tips.append(Tip.INSTANT_POT_RICE)
    if "air_fryer" in profile.kitchen_equipment:
        tips.append(Tip.AIR_FRYER_REHEAT)
    if profile.children > 0:
        tips.append(Tip.KIDS_HELP)

    return tips


def budget_tip_ids() -> list[Tip]:
    return [
        Tip.COST_PER_PERSON,
        Tip.BUY_PROTEIN_ON_SALE,
        Tip.STORE_BRANDS,
        Tip.CHECK_PANTRY,
        Tip.FROZEN_PRODUCE,
    ]


def picky_eater_tip_ids(level: PickyEaterLevel) -> list[Tip]:
    return list(PICKY_EATER_TIPS.get(level, GENERAL_PICKY_EATER_TIPS))


def cost_per_person_per_meal(total_cost: float, family_size: int, meal_count: int) -> float:
    servings = family_size * meal_count
    return total_cost / servings if servings else 0.0


# =============================================================================
# Wording
# =============================================================================


class TipTextResolver:
    """Resolves tip identifiers to display text. Swap ``texts`` to reword tips."""

    def __init__(self, texts: Mapping[Tip, str] | None = None):
        self.texts = dict(TIP_TEXT if texts is None else texts)

    def resolve(self, tips: Iterable[Tip], **context: Any) -> list[str]:
        """Render each tip, filling placeholders such as ``per_person_per_meal``."""
        return [self.texts[tip].format(**context) for tip in tips]
