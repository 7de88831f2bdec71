"""RecipeService: the one operation the CLI and export layers call.

Builds immutable domain inputs from raw values, runs the pipeline, and
turns NoRecipe into a ``NO_RECIPE`` result that asks for valid input.
"""

from __future__ import annotations

from typing import Any

import structlog
from pydantic import ValidationError

from panpizza.domain.models import Pan, Recipe
from panpizza.domain.pipeline import compute_recipe
from panpizza.domain.steps import INSTRUCTION_STEPS
from panpizza.domain.types import UnitSystem
from panpizza.services.base import BaseService
from panpizza.services.result import ErrorCode, ServiceResult

log = structlog.get_logger(__name__)

OP = "compute_recipe"
NO_RECIPE_MESSAGE = "Enter a positive pan width, pan length and number of pizzas"


def _payload(recipe: Recipe, pan: Pan, system: UnitSystem, pizza_count: int) -> dict[str, Any]:
    return {
        "recipe": recipe.weights(),
        "total_weight": recipe.total_weight,
        "pan": {"width": pan.width, "length": pan.length},
        "pizza_count": pizza_count,
        "unit_system": system.value,
        "unit_label": system.unit_label,
        "steps": list(INSTRUCTION_STEPS),
    }


class RecipeService(BaseService):
    """Compute dough recipes and announce them to plugins."""

    def compute(
        self,
        width: float,
        length: float,
        unit_system: UnitSystem | str = UnitSystem.METRIC,
        pizza_count: int = 1,
    ) -> ServiceResult:
        """Compute a recipe for *pizza_count* pans of *width* x *length*."""
        try:
            system = UnitSystem(unit_system)
        except ValueError:
            return ServiceResult.failure(
                OP,
                ErrorCode.INVALID_UNIT_SYSTEM,
                f"Unknown unit system: {unit_system}",
                allowed=[u.value for u in UnitSystem],
            )

        try:
            pan = Pan(width=width, length=length)
        except ValidationError:
            recipe = pan = None
        else:
            recipe = compute_recipe(pan, system, pizza_count)

        if recipe is None or pan is None:
            log.debug("recipe.none", width=width, length=length, pizza_count=pizza_count)
            return ServiceResult.failure(
                OP,
                ErrorCode.NO_RECIPE,
                NO_RECIPE_MESSAGE,
                width=width,
                length=length,
                pizza_count=pizza_count,
            )

        log.debug(
            "recipe.computed",
            unit_system=system.value,
            pizza_count=pizza_count,
            total_weight=recipe.total_weight,
        )
        warnings: list[str] = []
        self._notify(
            "post_recipe_ready",
            warnings,
            recipe=recipe.weights(),
            pizza_count=pizza_count,
            unit_system=system.value,
        )
        return ServiceResult.success(OP, _payload(recipe, pan, system, pizza_count), warnings)
