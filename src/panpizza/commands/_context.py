"""The object every panpizza command receives through ``@click.pass_obj``."""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING

import click

from panpizza.config.logging import configure_logging
from panpizza.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from panpizza.config.settings import PanPizzaSettings
    from panpizza.plugins.manager import PluginManager
    from panpizza.services.result import ServiceResult


class AppContext:
    """Settings, plugins and output routing for one CLI invocation."""

    def __init__(self, settings: PanPizzaSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @cached_property
    def plugins(self) -> PluginManager | None:
        """Installed reward plugins, loaded on first use; None when disabled."""
        if not self.settings.plugins_enabled:
            return None
        from panpizza.plugins.manager import PluginManager

        manager = PluginManager()
        manager.discover_and_load()
        return manager

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; a failed result goes to stderr and exits with code 1.

        Plugin warnings on a successful result go to stderr so a piped recipe
        stays clean. JSON output already carries them.
        """
        text = format_result(result, settings=self.output_settings)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)
        click.echo(text)
        if not self.settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
