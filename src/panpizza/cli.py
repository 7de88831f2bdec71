"""``panpizza`` entry point: output and config flags shared by every command."""

from __future__ import annotations

from typing import Any

import click

from panpizza import __version__
from panpizza.commands import register_commands
from panpizza.commands._base import PanPizzaGroup
from panpizza.commands._context import AppContext
from panpizza.config.settings import PanPizzaSettings


@click.group(
    "panpizza",
    cls=PanPizzaGroup,
    invoke_without_command=True,
    examples="""\
panpizza recipe
panpizza --json recipe --pizzas 2
panpizza -c ~/pizza/panpizza.toml export pdf --output friday.pdf""",
)
@click.version_option(version=__version__, prog_name="panpizza")
@click.option("--json", "json_output", is_flag=True, help="Print the result as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only ingredient weights or paths.")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logs and error detail.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option("--no-plugins", is_flag=True, help="Skip the recipe-ready plugins.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    help="Read this panpizza.toml instead of searching for one.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: Any) -> None:
    """Work out a pan pizza dough recipe from the pan size and pizza count."""
    ctx.obj = AppContext(PanPizzaSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
