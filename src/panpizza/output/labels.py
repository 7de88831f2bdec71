"""Display helpers shared by the terminal renderer and document export.

Canonical ingredient keys are snake_case; everything a person reads goes
through these helpers.
"""

from __future__ import annotations

from typing import Any


def display_name(key: str) -> str:
    """``"diastatic_malt_powder"`` -> ``"Diastatic malt powder"``."""
    words = key.replace("-", "_").split("_")
    text = " ".join(w for w in words if w)
    return text[:1].upper() + text[1:]


def format_grams(grams: float) -> str:
    """Whole-gram values without a trailing ``.0``; others to one decimal."""
    value = float(grams)
    if value.is_integer():
        return str(int(value))
    return f"{value:.1f}"


def format_dimension(value: float) -> str:
    """Pan dimension as entered (``28`` rather than ``28.0``)."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return f"{value:g}"


def pan_summary(data: dict[str, Any]) -> str:
    """One-line description of what the recipe is for."""
    pan = data["pan"]
    return (
        f"Recipe is for {data['pizza_count']} pizza(s) baked in a "
        f"{format_dimension(pan['width'])}x{format_dimension(pan['length'])} "
        f"{data['unit_label']} pan"
    )
