"""Value objects flowing through the calculation pipeline.

All models are frozen. They are built fresh per calculation and compared
by value only.
"""

from __future__ import annotations

from pydantic import BaseModel

from panpizza.domain.types import IngredientClass, UnitSystem


class Pan(BaseModel):
    """Pan dimensions in the unit implied by the active UnitSystem.

    Non-positive and non-finite values are accepted here; the pipeline
    turns them into NoRecipe rather than rejecting the pan.
    """

    model_config = {"frozen": True}

    width: float
    length: float


class RecipeRequest(BaseModel):
    """Everything one calculation needs, passed in explicitly."""

    model_config = {"frozen": True}

    pan: Pan
    unit_system: UnitSystem = UnitSystem.METRIC
    pizza_count: int = 1


class IngredientWeight(BaseModel):
    """Rounded weight of one ingredient, in grams."""

    model_config = {"frozen": True}

    name: str
    grams: int | float
    ingredient_class: IngredientClass


class Recipe(BaseModel):
    """Computed dough recipe.

    Attributes:
        ingredients: One weight per profile entry, in profile order.
        total_weight: Sum of the rounded ingredient weights, in grams.
    """

    model_config = {"frozen": True}

    ingredients: tuple[IngredientWeight, ...]
    total_weight: float

    def weights(self) -> dict[str, float]:
        """Return a new ``name -> grams`` dict in profile order."""
        return {item.name: item.grams for item in self.ingredients}

    def weight(self, name: str) -> float:
        """Grams of a single ingredient. Raises KeyError for unknown names."""
        for item in self.ingredients:
            if item.name == name:
                return item.grams
        raise KeyError(name)
