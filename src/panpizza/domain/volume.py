"""Dough volume estimation from pan area."""

from __future__ import annotations

import math

# Empirical dough thickness factor per unit of pan area.
DOUGH_DENSITY_CONSTANT = 0.1035
# Grams per ounce.
GRAMS_PER_UNIT_CONSTANT = 28.35


def is_valid_pizza_count(pizza_count: object) -> bool:
    """True for integers >= 1 (bools and integral-looking floats excluded)."""
    return isinstance(pizza_count, int) and not isinstance(pizza_count, bool) and pizza_count >= 1


def estimate_dough_volume(area: float, pizza_count: int) -> float:
    """Return the dough mass proxy in grams for *pizza_count* pans of *area*.

    Returns 0.0 when the area is not positive and finite, the pizza count
    is not a positive integer, or the product leaves the float range.
    """
    if not math.isfinite(area) or area <= 0:
        return 0.0
    if not is_valid_pizza_count(pizza_count):
        return 0.0
    try:
        volume = area * DOUGH_DENSITY_CONSTANT * GRAMS_PER_UNIT_CONSTANT * pizza_count
    except OverflowError:
        return 0.0
    return volume if math.isfinite(volume) else 0.0
