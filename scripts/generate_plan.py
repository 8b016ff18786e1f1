#!/usr/bin/env python
"""
Generate a meal plan from a household profile and print it as JSON.

The profile is the same camelCase JSON the meal plan form sends, e.g.:

    {"pickyEaterLevel": "moderate", "cookingTimeAvailable": 60,
     "cookingSkillLevel": "beginner", "familySize": 4, "children": 2}

Run with: python scripts/generate_plan.py profile.json --seed 7
          cat profile.json | python scripts/generate_plan.py -

Environment Variables:
    MEALPLAN_MEALS_PER_PLAN: Default number of dinners (default: 5)
    MEALPLAN_SELECTION_SEED: Seed for reproducible selection
    MEALPLAN_LOG_LEVEL: Log level for stderr output (default: INFO)
"""

import argparse
import json
import random
import sys
import uuid

from pydantic import ValidationError

from familymeals.config import get_settings
from familymeals.logging_config import configure_logging, get_logger
from familymeals.plan import MealPlanGenerator, NoSuitableRecipesError
from familymeals.schemas import MealPlanInput

logger = get_logger(__name__)


def load_profile(path: str) -> MealPlanInput:
    if path == "-":
        raw = sys.stdin.read()
    else:
        with open(path, encoding="utf-8") as f:
            raw = f.read()
    return MealPlanInput.model_validate_json(raw)


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate a weekly family meal plan")
    parser.add_argument("profile", help="Path to a profile JSON file, or - for stdin")
    parser.add_argument("--seed", "-s", type=int, help="Seed for reproducible meal selection")
    parser.add_argument("--days", "-d", type=int, help="Number of dinners to plan")
    parser.add_argument("--session-id", type=str, help="Session id to echo in the result")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent")

    args = parser.parse_args()

    settings = get_settings()
    configure_logging(log_level=settings.log_level)

    try:
        profile = load_profile(args.profile)
    except ValidationError as e:
        logger.error(f"Invalid profile: {e}")
        return 2

    rng = random.Random(args.seed) if args.seed is not None else None
    generator = MealPlanGenerator(rng=rng, settings=settings)

    try:
        result = generator.generate(
            profile,
            session_id=args.session_id or str(uuid.uuid4()),
            meal_count=args.days,
        )
    except NoSuitableRecipesError as e:
        logger.error(str(e))
        return 1

    print(json.dumps(result.to_payload(), indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
