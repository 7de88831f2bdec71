"""Tests for pan area normalization."""

import math

import pytest

from panpizza.domain.models import Pan
from panpizza.domain.types import UnitSystem
from panpizza.domain.units import CM_PER_INCH, pan_area


class TestPanArea:
    def test_metric_divides_each_dimension(self, default_pan: Pan) -> None:
        area = pan_area(default_pan, UnitSystem.METRIC)
        assert area == pytest.approx((28 / 2.54) * (40 / 2.54))
        assert area == pytest.approx(173.6003, abs=1e-4)

    def test_imperial_uses_dimensions_as_given(self, default_pan: Pan) -> None:
        assert pan_area(default_pan, UnitSystem.IMPERIAL) == 28 * 40

    def test_imperial_is_not_divided(self, default_pan: Pan) -> None:
        """Same numbers read as inches cover CM_PER_INCH squared more area."""
        metric = pan_area(default_pan, UnitSystem.METRIC)
        imperial = pan_area(default_pan, UnitSystem.IMPERIAL)
        assert imperial != metric
        assert imperial == pytest.approx(metric * CM_PER_INCH**2)

    def test_accepts_plain_string_system(self, default_pan: Pan) -> None:
        assert pan_area(default_pan, "imperial") == 1120  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "width,length",
        [
            (0, 40),
            (28, 0),
            (-28, 40),
            (28, -1),
            (math.nan, 40),
            (28, math.inf),
            (-math.inf, 40),
        ],
    )
    @pytest.mark.parametrize("system", list(UnitSystem))
    def test_degenerate_pan_is_zero(self, width: float, length: float, system: UnitSystem) -> None:
        assert pan_area(Pan(width=width, length=length), system) == 0.0

    @pytest.mark.parametrize("system", list(UnitSystem))
    def test_overflowing_area_is_zero(self, system: UnitSystem) -> None:
        assert pan_area(Pan(width=1e200, length=1e200), system) == 0.0
