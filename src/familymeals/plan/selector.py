"""Category-aware meal selection."""

import random
from collections.abc import Sequence

from familymeals.logging_config import get_logger
from familymeals.schemas import MEAL_CATEGORIES, RecipeTemplate

logger = get_logger(__name__)


def select_diverse_meals(
    candidates: Sequence[RecipeTemplate],
    count: int,
    rng: random.Random | None = None,
) -> list[RecipeTemplate]:
    """
    Pick ``count`` recipes with as much category variety as the candidates allow.

    First pass takes one random recipe from each meal category, in the fixed
    order quick, batch_cook, slow_cooker, one_pot, family_favorite. Second
    pass fills any remaining slots at random from what is left.

    The picks are random, so identical inputs give different weeks. Pass a
    seeded ``rng`` for a reproducible selection.

    Args:
        candidates: Filtered recipes to choose from.
        count: Number of meals wanted.
        rng: Random source. Defaults to a fresh system-seeded generator.

    Returns:
        ``min(count, len(candidates))`` recipes. When there are no more
        candidates than ``count``, all of them in their original order.
    """
    if count <= 0:
        return []

    if len(candidates) <= count:
        return list(candidates)

    rng = rng or random.Random()
    selected: list[int] = []  # indices into candidates

    for category in MEAL_CATEGORIES:
        if len(selected) >= count:
            break

        in_category = [
            i
            for i, recipe in enumerate(candidates)
            if recipe.category == category and i not in selected
        ]
        if in_category:
            selected.append(rng.choice(in_category))

    while len(selected) < count:
        remaining = [i for i in range(len(candidates)) if i not in selected]
        if not remaining:
            break
        selected.append(rng.choice(remaining))

    picks = [candidates[i] for i in selected]
    logger.debug(
        f"Selected {len(picks)} of {len(candidates)} candidates: "
        f"{[recipe.category for recipe in picks]}"
    )
    return picks
