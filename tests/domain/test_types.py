"""Tests for domain type enums — parametrized."""

import pytest

from panpizza.domain.types import IngredientClass, UnitSystem

ENUM_CASES = [
    (UnitSystem, {"metric", "imperial"}),
    (IngredientClass, {"small_quantity", "standard"}),
]


@pytest.mark.parametrize(
    "enum_cls,expected_values",
    ENUM_CASES,
    ids=[cls.__name__ for cls, _ in ENUM_CASES],
)
def test_enum_members_and_values(enum_cls: type, expected_values: set[str]) -> None:
    """Each StrEnum has the expected members with matching string values."""
    actual_values = {e.value for e in enum_cls}
    assert actual_values == expected_values
    for member in enum_cls:
        assert member == member.value
        assert isinstance(member, str)


@pytest.mark.parametrize(
    "system,label",
    [(UnitSystem.METRIC, "cm"), (UnitSystem.IMPERIAL, "in")],
)
def test_unit_label(system: UnitSystem, label: str) -> None:
    assert system.unit_label == label


def test_ingredient_class_decimals() -> None:
    assert IngredientClass.SMALL_QUANTITY.decimals == 1
    assert IngredientClass.STANDARD.decimals == 0
