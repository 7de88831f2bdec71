"""Pan area normalization.

The dough constants downstream are calibrated per square inch, so the
pipeline's common linear unit is the inch. Metric pans are converted by
dividing each dimension by CM_PER_INCH; imperial pans are already in
inches and are used as given.
"""

from __future__ import annotations

import math

from panpizza.domain.models import Pan
from panpizza.domain.types import UnitSystem

CM_PER_INCH = 2.54


def _usable(value: float) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value) and value > 0


def pan_area(pan: Pan, unit_system: UnitSystem) -> float:
    """Return the normalized pan area, or 0.0 for a degenerate pan.

    A pan is degenerate when either dimension is zero, negative, or not
    finite, or when the area itself overflows.
    """
    if not (_usable(pan.width) and _usable(pan.length)):
        return 0.0
    if UnitSystem(unit_system) is UnitSystem.METRIC:
        area = (pan.width / CM_PER_INCH) * (pan.length / CM_PER_INCH)
    else:
        area = pan.width * pan.length
    return area if math.isfinite(area) else 0.0
