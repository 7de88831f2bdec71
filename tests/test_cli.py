"""Tests for the root panpizza CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from panpizza import __version__
from panpizza.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "panpizza" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json", "--no-plugins"])
def test_global_flags_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/missing-panpizza.toml", "--version"])
    assert result.exit_code == 0


@pytest.mark.parametrize("name", ["recipe", "export"])
def test_commands_registered(name: str) -> None:
    assert name in cli.commands


@pytest.mark.parametrize("sub", ["pdf", "markdown"])
def test_export_subcommands(cli_runner: CliRunner, sub: str) -> None:
    result = cli_runner.invoke(cli, ["export", sub, "--help"])
    assert result.exit_code == 0


def test_root_examples(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--examples"])
    assert result.exit_code == 0
    assert "Examples for 'panpizza'" in result.output
    assert "  panpizza --json recipe --pizzas 2" in result.output


def test_rejected_config_exits_cleanly(cli_runner: CliRunner, tmp_path: Path) -> None:
    (tmp_path / "panpizza.toml").write_text('[export]\npage_size = "Tabloidish"\n')
    result = cli_runner.invoke(cli, ["recipe"])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)
