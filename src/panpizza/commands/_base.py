"""Click classes whose commands can print worked examples.

``--help`` stays short; ``--examples`` prints sample pan sizes and pizza
counts for the command and exits.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    examples = getattr(ctx.command, "examples", None) or ""
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(examples)
    ctx.exit(0)


class _ExamplesMixin:
    """Adds an eager ``--examples`` flag when examples text is given."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = textwrap.indent(textwrap.dedent(examples).strip(), "  ") if examples else None
        if self.examples:
            self.params.append(  # type: ignore[attr-defined]
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_print_examples,
                    help="Show usage examples.",
                )
            )


class PanPizzaCommand(_ExamplesMixin, click.Command):
    """Command that accepts ``examples=``."""


class PanPizzaGroup(_ExamplesMixin, click.Group):
    """Group that accepts ``examples=`` and hands it on to its subcommands."""

    command_class = PanPizzaCommand
