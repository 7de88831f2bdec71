"""Settings for one panpizza invocation.

Recipe defaults, export options and plugin switches come from four places,
highest priority first: CLI flags, ``PANPIZZA_*`` environment variables,
the nearest ``panpizza.toml``, and the defaults in
:mod:`panpizza.config.models`.
"""

from __future__ import annotations

import os
import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, TomlConfigSettingsSource

from panpizza.config.models import DefaultsConfig, ExportConfig, PluginsConfig

CONFIG_FILENAME = "panpizza.toml"
CONFIG_ENV_VAR = "PANPIZZA_CONFIG"

# The TOML file being read while PanPizzaSettings is constructed.
_active_toml: ContextVar[Path | None] = ContextVar("panpizza_active_toml", default=None)


def find_config(start: Path | None = None) -> Path | None:
    """Locate the ``panpizza.toml`` that applies to *start* (default: cwd).

    ``PANPIZZA_CONFIG`` wins when set; a missing file there means no config,
    not a fallback to the search. Otherwise the nearest file walking up from
    *start* is used.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


class PanPizzaSettings(BaseSettings):
    """Everything a command needs to know about how it was invoked.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        defaults: Pan and pizza count used for omitted recipe options.
        export: Page size and title for printable documents.
        plugins: Whether ``post_recipe_ready`` plugins are loaded.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PANPIZZA_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_plugins: bool = False

    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, _active_toml.get()),
        )

    @property
    def plugins_enabled(self) -> bool:
        """Plugins run unless disabled by flag or config."""
        return self.plugins.enabled and not self.no_plugins

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start_dir: Path | None = None,
        **cli_flags: Any,
    ) -> PanPizzaSettings:
        """Build settings for a CLI run.

        An explicit *config_path* that does not exist is ignored rather than
        searched around. Unreadable TOML and values the section models reject
        are reported as :class:`click.ClickException`.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(start_dir)

        token = _active_toml.set(toml_path)
        try:
            return cls(config_path=toml_path, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc
        except ValidationError as exc:
            source = toml_path or "environment"
            raise click.ClickException(f"Invalid configuration in {source}:\n{exc}") from exc
        finally:
            _active_toml.reset(token)
