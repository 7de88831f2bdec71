"""Baker's-percentage profiles.

A profile is an ordered list of ingredients, each expressed as a percentage
of total flour weight and tagged with the rounding class its computed weight
gets. The percentage total is always derived from the entries, so any change
to a profile flows through to the flour-weight derivation.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from panpizza.domain.types import IngredientClass


class ProfileEntry(BaseModel):
    """One ingredient in a profile."""

    model_config = {"frozen": True}

    name: str = Field(min_length=1)
    percentage: float = Field(ge=0, allow_inf_nan=False)
    ingredient_class: IngredientClass = IngredientClass.STANDARD


class BakersPercentageProfile(BaseModel):
    """Ordered, immutable set of baker's percentages.

    Attributes:
        name: Human-readable profile name.
        entries: Ingredients in declaration order; names must be unique.
    """

    model_config = {"frozen": True}

    name: str
    entries: tuple[ProfileEntry, ...]

    @model_validator(mode="after")
    def _unique_names(self) -> BakersPercentageProfile:
        seen: set[str] = set()
        for entry in self.entries:
            if entry.name in seen:
                msg = f"Duplicate ingredient in profile {self.name!r}: {entry.name}"
                raise ValueError(msg)
            seen.add(entry.name)
        return self

    @property
    def percentage_total(self) -> float:
        """Sum of all percentages (flour plus everything else)."""
        return sum(entry.percentage for entry in self.entries)

    def names(self) -> list[str]:
        """Ingredient names in declaration order."""
        return [entry.name for entry in self.entries]

    def get(self, name: str) -> ProfileEntry | None:
        """Look up an entry by ingredient name."""
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None


REFERENCE_PROFILE = BakersPercentageProfile(
    name="pan-pizza-75",
    entries=(
        ProfileEntry(name="bread_flour", percentage=95),
        ProfileEntry(name="wholemeal_flour", percentage=5),
        ProfileEntry(
            name="diastatic_malt_powder",
            percentage=1,
            ingredient_class=IngredientClass.SMALL_QUANTITY,
        ),
        ProfileEntry(name="yeast", percentage=0.5, ingredient_class=IngredientClass.SMALL_QUANTITY),
        ProfileEntry(name="water", percentage=75),
        ProfileEntry(name="salt", percentage=2, ingredient_class=IngredientClass.SMALL_QUANTITY),
    ),
)
