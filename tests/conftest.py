"""Shared pytest fixtures and test helpers for panpizza tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from panpizza.domain.models import Pan
from panpizza.output.document import RecipePDF
from panpizza.plugins.hookspecs import hookimpl
from panpizza.services.recipe import RecipeService
from panpizza.services.result import ServiceResult


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty temp dir with no PANPIZZA_* env leaking in."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "PANPIZZA_CONFIG",
        "PANPIZZA_JSON_OUTPUT",
        "PANPIZZA_QUIET",
        "PANPIZZA_VERBOSE",
        "PANPIZZA_NO_PLUGINS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def default_pan() -> Pan:
    """The 28 x 40 cm pan the app starts with."""
    return Pan(width=28, length=40)


@pytest.fixture
def recipe_result() -> ServiceResult:
    """A successful compute_recipe result for the default pan."""
    result = RecipeService().compute(28, 40, "metric", 1)
    assert result.ok
    return result


@pytest.fixture
def uncompressed_pdf(monkeypatch: pytest.MonkeyPatch) -> None:
    """Write PDF page streams as plain text so layouts can be inspected."""
    original_init = RecipePDF.__init__

    def init(self: RecipePDF, *args: Any, **kwargs: Any) -> None:
        original_init(self, *args, **kwargs)
        self.set_compression(False)

    monkeypatch.setattr(RecipePDF, "__init__", init)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


class RecordingPlugin:
    """Collects post_recipe_ready calls."""

    def __init__(self) -> None:
        self.calls: list[dict] = []

    @hookimpl
    def post_recipe_ready(self, recipe: dict, pizza_count: int, unit_system: str) -> None:
        self.calls.append(
            {"recipe": recipe, "pizza_count": pizza_count, "unit_system": unit_system}
        )


class FailingPlugin:
    """Raises from every hook."""

    @hookimpl
    def post_recipe_ready(self, recipe: dict, pizza_count: int, unit_system: str) -> None:
        raise RuntimeError("confetti cannon jammed")


def pdf_text(content: bytes) -> str:
    """Page text of an uncompressed PDF with string escapes undone."""
    return content.decode("latin-1").replace("\\(", "(").replace("\\)", ")")
