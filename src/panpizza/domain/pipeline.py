"""The canonical calculation pipeline.

pan -> area -> dough volume -> flour weight -> recipe. Any stage that yields
zero short-circuits to NoRecipe (``None``); nothing here raises for
degenerate input.
"""

from __future__ import annotations

from panpizza.domain.flour import derive_flour_weight
from panpizza.domain.models import Pan, Recipe, RecipeRequest
from panpizza.domain.profile import REFERENCE_PROFILE, BakersPercentageProfile
from panpizza.domain.recipe import compose_recipe
from panpizza.domain.types import UnitSystem
from panpizza.domain.units import pan_area
from panpizza.domain.volume import estimate_dough_volume


def compute_recipe(
    pan: Pan,
    unit_system: UnitSystem,
    pizza_count: int,
    profile: BakersPercentageProfile = REFERENCE_PROFILE,
) -> Recipe | None:
    """Compute the dough recipe for *pizza_count* pans, or None."""
    area = pan_area(pan, unit_system)
    if not area:
        return None
    volume = estimate_dough_volume(area, pizza_count)
    if not volume:
        return None
    flour = derive_flour_weight(volume, profile)
    if not flour:
        return None
    return compose_recipe(flour, profile)


def compute_from_request(
    request: RecipeRequest,
    profile: BakersPercentageProfile = REFERENCE_PROFILE,
) -> Recipe | None:
    """Convenience wrapper taking a :class:`RecipeRequest`."""
    return compute_recipe(request.pan, request.unit_system, request.pizza_count, profile)
