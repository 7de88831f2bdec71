"""Standalone command: compute a dough recipe."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from panpizza.commands._base import PanPizzaCommand
from panpizza.domain.types import UnitSystem

if TYPE_CHECKING:
    from panpizza.commands._context import AppContext
    from panpizza.services.result import ServiceResult

P = ParamSpec("P")
R = TypeVar("R")


def recipe_options(func: Callable[P, R]) -> Callable[P, R]:
    """Apply the shared pan/pizza input flags to a command."""
    func = click.option(
        "--pizzas",
        "pizza_count",
        type=int,
        default=None,
        help="Number of pizzas (pans) to make.",
    )(func)
    func = click.option(
        "--unit",
        "unit_system",
        type=click.Choice([u.value for u in UnitSystem], case_sensitive=False),
        default=None,
        help="Unit system the pan dimensions are given in.",
    )(func)
    func = click.option("--length", type=float, default=None, help="Pan length.")(func)
    func = click.option("--width", type=float, default=None, help="Pan width.")(func)
    return func


def compute_from_options(
    app: AppContext,
    *,
    width: float | None,
    length: float | None,
    unit_system: str | None,
    pizza_count: int | None,
) -> ServiceResult:
    """Fill omitted options from ``[defaults]`` and run RecipeService."""
    from panpizza.services.recipe import RecipeService

    defaults = app.settings.defaults
    return RecipeService(app.plugins).compute(
        width=defaults.width if width is None else width,
        length=defaults.length if length is None else length,
        unit_system=defaults.unit_system if unit_system is None else unit_system.lower(),
        pizza_count=defaults.pizza_count if pizza_count is None else pizza_count,
    )


@click.command(
    "recipe",
    cls=PanPizzaCommand,
    examples="""\
  panpizza recipe
  panpizza recipe --width 28 --length 40 --pizzas 2
  panpizza recipe --unit imperial --width 10 --length 14
  panpizza --json recipe --pizzas 3""",
)
@recipe_options
@click.pass_obj
def recipe(
    app: AppContext,
    width: float | None,
    length: float | None,
    unit_system: str | None,
    pizza_count: int | None,
) -> None:
    """Compute the dough recipe for a pan size and pizza count."""
    app.emit(
        compute_from_options(
            app,
            width=width,
            length=length,
            unit_system=unit_system,
            pizza_count=pizza_count,
        )
    )
