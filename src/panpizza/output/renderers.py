"""Terminal rendering of service results.

``render_result`` picks a renderer by ``result.op``; a failed result always
gets the error renderer. ``render_quiet`` prints only what a script needs:
``name grams`` lines for a recipe, the path for an export.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from panpizza.output.console import create_console
from panpizza.output.labels import display_name, format_grams, pan_summary

if TYPE_CHECKING:
    from rich.console import Console

    from panpizza.services.result import ServiceResult

Renderer = Callable[["ServiceResult", "Console", bool], None]

_EXPORT_FIELDS = ("path", "bytes", "page_size")


def _ok_banner(console: Console, op: str) -> None:
    console.print(Text.assemble(("OK", "pp.ok"), "  ", (op, "pp.op")))


def _pairs(console: Console, items: Iterable[tuple[str, Any]]) -> None:
    for key, value in items:
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"))
        style = "pp.path" if key == "path" else ""
        console.print(Text.assemble((f"  {key}: ", "pp.key"), (str(value), style)))


def recipe_table(recipe: dict[str, float], total_weight: float | None = None) -> Table:
    """Ingredient / weight table, with a total row when *total_weight* is given."""
    table = Table(pad_edge=False)
    table.add_column("Ingredient", style="pp.title")
    table.add_column("Weight (grams)", justify="right")
    for name, grams in recipe.items():
        # Tenth-gram ingredients carry float weights.
        style = "pp.small" if isinstance(grams, float) else "pp.grams"
        table.add_row(display_name(name), Text(format_grams(grams), style=style))
    if total_weight is not None:
        table.add_section()
        table.add_row(Text("Total", style="bold"), Text(format_grams(total_weight), style="bold"))
    return table


def _recipe(result: ServiceResult, console: Console, verbose: bool) -> None:
    data = result.data
    console.print(Text(pan_summary(data), style="pp.title"))
    console.print()
    console.print(recipe_table(data["recipe"], data.get("total_weight")))

    steps = data.get("steps") or ()
    if steps:
        console.print()
        console.print(Text("Instructions", style="bold underline"))
        for number, step in enumerate(steps, start=1):
            console.print(Text(f"  {number}. {step}"))

    if verbose:
        console.print()
        _pairs(console, [("unit_system", data.get("unit_system", ""))])


def _export(result: ServiceResult, console: Console, verbose: bool) -> None:
    _ok_banner(console, result.op)
    _pairs(console, ((key, result.data[key]) for key in _EXPORT_FIELDS if key in result.data))


def _generic(result: ServiceResult, console: Console, verbose: bool) -> None:
    _ok_banner(console, result.op)
    _pairs(console, result.data.items())


def _error(result: ServiceResult, console: Console, verbose: bool) -> None:
    error = result.error
    message = error.message if error else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "pp.error"), "  ", (result.op, "pp.op"), " — ", message)
    )
    if verbose and error and error.detail:
        console.print(Text("  detail:", style="dim"))
        for key, value in error.detail.items():
            console.print(Text(f"    {key}: {value}"))


_RENDERERS: dict[str, Renderer] = {
    "compute_recipe": _recipe,
    "export_pdf": _export,
    "export_markdown": _export,
}


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* for a person reading a terminal."""
    render = _RENDERERS.get(result.op, _generic) if result.ok else _error
    console = create_console()
    with console.capture() as capture:
        render(result, console, verbose)
    return capture.get().rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render the bare minimum for ``--quiet``."""
    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {message}"
    recipe = result.data.get("recipe")
    if isinstance(recipe, dict):
        return "\n".join(f"{name} {format_grams(grams)}" for name, grams in recipe.items())
    if "path" in result.data:
        return str(result.data["path"])
    return f"OK: {result.op}"
