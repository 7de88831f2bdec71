"""Subcommand modules for panpizza.

Provides register_commands() which uses deferred imports to keep
``panpizza --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from panpizza.commands.export import export

    cli.add_command(export)

    # --- Standalone commands ---
    from panpizza.commands.recipe import recipe

    cli.add_command(recipe)
