"""Unit system and ingredient classification enums."""

from __future__ import annotations

from enum import StrEnum


class UnitSystem(StrEnum):
    """Linear unit the pan dimensions are given in."""

    METRIC = "metric"
    IMPERIAL = "imperial"

    @property
    def unit_label(self) -> str:
        """Display label for pan dimensions (``cm`` or ``in``)."""
        return "cm" if self is UnitSystem.METRIC else "in"


class IngredientClass(StrEnum):
    """Rounding class attached to each profile entry.

    Small-quantity ingredients are weighed to the tenth of a gram; whole-gram
    rounding would distort them too much relative to their size.
    """

    SMALL_QUANTITY = "small_quantity"
    STANDARD = "standard"

    @property
    def decimals(self) -> int:
        """Number of decimal places a weight of this class keeps."""
        return 1 if self is IngredientClass.SMALL_QUANTITY else 0
