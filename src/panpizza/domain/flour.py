"""Total flour weight derivation."""

from __future__ import annotations

import math

from panpizza.domain.profile import REFERENCE_PROFILE, BakersPercentageProfile


def derive_flour_weight(
    volume: float,
    profile: BakersPercentageProfile = REFERENCE_PROFILE,
) -> float:
    """Back-derive total flour weight from the dough volume.

    Flour is 100% by definition, so flour = volume * 100 / percentage_total.
    Returns 0.0 for a non-positive or non-finite volume, or a profile whose
    percentages sum to zero.
    """
    if not math.isfinite(volume) or volume <= 0:
        return 0.0
    total = profile.percentage_total
    if total <= 0:
        return 0.0
    flour = volume * 100 / total
    return flour if math.isfinite(flour) else 0.0
