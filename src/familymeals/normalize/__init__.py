"""Normalize ingredient quantities and money amounts."""

from familymeals.normalize.quantities import (
    round_amount,
    round_cost,
    scale_amount,
    scale_factor,
)

__all__ = [
    "round_amount",
    "round_cost",
    "scale_amount",
    "scale_factor",
]
