"""Quantity scaling and rounding utilities."""

from decimal import ROUND_HALF_UP, Decimal

AMOUNT_STEP = Decimal("0.1")
CENT = Decimal("0.01")


def _round_half_up(value: float, step: Decimal) -> float:
    # repr() gives the shortest decimal form, so 2.675 rounds as written
    return float(Decimal(repr(value)).quantize(step, rounding=ROUND_HALF_UP))


def round_amount(value: float) -> float:
    """Round an ingredient amount to one decimal place."""
    return _round_half_up(value, AMOUNT_STEP)


def round_cost(value: float) -> float:
    """Round a dollar amount to cents."""
    return _round_half_up(value, CENT)


def scale_factor(family_size: int, servings: int) -> float:
    """Ratio between the servings needed and the servings a recipe is written for."""
    return family_size / servings


def scale_amount(amount: float, factor: float) -> float:
    """Scale an ingredient amount and round it to one decimal place."""
    return round_amount(amount * factor)
