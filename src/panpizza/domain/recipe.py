"""Recipe composition: per-ingredient weights and rounding policy.

Weights round half up, matching how bakers read a scale: 2.85 g becomes
2.9 g and 214.5 g becomes 215 g. ``Decimal`` keeps the total an exact sum of
the rounded values, so the only drift against the raw total is the
accumulated per-ingredient rounding, which is accepted as is.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

from panpizza.domain.models import IngredientWeight, Recipe
from panpizza.domain.profile import REFERENCE_PROFILE, BakersPercentageProfile
from panpizza.domain.types import IngredientClass

_QUANTUM = {0: Decimal("1"), 1: Decimal("0.1")}
# Wide enough for every finite float at 0.1 g resolution.
_CONTEXT = Context(prec=400)


def round_weight(grams: float, ingredient_class: IngredientClass) -> Decimal:
    """Round a raw weight to the resolution of its ingredient class."""
    quantum = _QUANTUM[ingredient_class.decimals]
    return Decimal(grams).quantize(quantum, rounding=ROUND_HALF_UP, context=_CONTEXT)


def _to_number(value: Decimal, ingredient_class: IngredientClass) -> int | float:
    if ingredient_class.decimals == 0:
        return int(value)
    return float(value)


def compose_recipe(
    total_flour_weight: float,
    profile: BakersPercentageProfile = REFERENCE_PROFILE,
) -> Recipe | None:
    """Distribute *total_flour_weight* across the profile.

    Returns None (NoRecipe) when the flour weight is not positive and finite,
    or when the summed weights no longer fit in a float.
    """
    if not math.isfinite(total_flour_weight) or total_flour_weight <= 0:
        return None

    ingredients: list[IngredientWeight] = []
    total = Decimal(0)
    for entry in profile.entries:
        raw = total_flour_weight * entry.percentage / 100
        if not math.isfinite(raw):
            return None
        rounded = round_weight(raw, entry.ingredient_class)
        total = _CONTEXT.add(total, rounded)
        ingredients.append(
            IngredientWeight(
                name=entry.name,
                grams=_to_number(rounded, entry.ingredient_class),
                ingredient_class=entry.ingredient_class,
            )
        )

    total_weight = float(total)
    if not math.isfinite(total_weight):
        return None
    return Recipe(ingredients=tuple(ingredients), total_weight=total_weight)
