"""Command group: recipe export (pdf, markdown)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from panpizza.commands._base import PanPizzaGroup
from panpizza.commands.recipe import compute_from_options, recipe_options
from panpizza.config.models import PAGE_SIZES

if TYPE_CHECKING:
    from panpizza.commands._context import AppContext

_EXPORT_EXAMPLES = """\
  panpizza export pdf --output recipe.pdf
  panpizza export pdf --output recipe.pdf --pizzas 2 --page-size Letter
  panpizza export markdown --output recipe.md --unit imperial --width 10 --length 14"""


@click.group(cls=PanPizzaGroup, examples=_EXPORT_EXAMPLES)
@click.pass_obj
def export(app: AppContext) -> None:
    """Export a recipe as a printable document."""


@export.command(
    examples="""\
  panpizza export pdf --output recipe.pdf
  panpizza export pdf --output ~/Desktop/pizza.pdf --pizzas 4"""
)
@recipe_options
@click.option("--output", required=True, type=click.Path(), help="Output PDF file.")
@click.option(
    "--page-size",
    type=click.Choice(PAGE_SIZES, case_sensitive=False),
    default=None,
    help="Page size (defaults to [export] page_size).",
)
@click.pass_obj
def pdf(
    app: AppContext,
    width: float | None,
    length: float | None,
    unit_system: str | None,
    pizza_count: int | None,
    output: str,
    page_size: str | None,
) -> None:
    """Compute a recipe and write it to a PDF page."""
    from panpizza.services.export import ExportService

    result = compute_from_options(
        app, width=width, length=length, unit_system=unit_system, pizza_count=pizza_count
    )
    config = app.settings.export
    app.emit(
        ExportService(app.plugins).export_pdf(
            result,
            Path(output),
            page_size=page_size or config.page_size,
            title=config.title,
        )
    )


@export.command(
    examples="""\
  panpizza export markdown --output recipe.md
  panpizza export markdown --output recipe.md --pizzas 2"""
)
@recipe_options
@click.option("--output", required=True, type=click.Path(), help="Output Markdown file.")
@click.pass_obj
def markdown(
    app: AppContext,
    width: float | None,
    length: float | None,
    unit_system: str | None,
    pizza_count: int | None,
    output: str,
) -> None:
    """Compute a recipe and write it as Markdown."""
    from panpizza.services.export import ExportService

    result = compute_from_options(
        app, width=width, length=length, unit_system=unit_system, pizza_count=pizza_count
    )
    app.emit(
        ExportService(app.plugins).export_markdown(
            result, Path(output), title=app.settings.export.title
        )
    )
