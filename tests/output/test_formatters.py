"""Tests for output mode selection."""

import json

from panpizza.output.formatters import OutputSettings, format_result
from panpizza.services.result import ServiceResult


def test_default_is_rich(recipe_result: ServiceResult) -> None:
    assert "Bread flour" in format_result(recipe_result)


def test_json(recipe_result: ServiceResult) -> None:
    output = format_result(recipe_result, settings=OutputSettings(json_output=True))
    parsed = json.loads(output)
    assert parsed["ok"] is True
    assert parsed["data"]["recipe"]["water"] == 214
    assert list(parsed["data"]["recipe"]) == [
        "bread_flour",
        "wholemeal_flour",
        "diastatic_malt_powder",
        "yeast",
        "water",
        "salt",
    ]


def test_json_wins_over_quiet(recipe_result: ServiceResult) -> None:
    output = format_result(recipe_result, settings=OutputSettings(json_output=True, quiet=True))
    assert json.loads(output)["op"] == "compute_recipe"


def test_quiet(recipe_result: ServiceResult) -> None:
    output = format_result(recipe_result, settings=OutputSettings(quiet=True))
    assert output.splitlines()[-1] == "salt 5.7"
