"""Pick the output mode for a service result: JSON, quiet or rich."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from panpizza.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from panpizza.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """How results should be shown; ``json_output`` beats ``quiet``."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    mode = settings or OutputSettings()
    if mode.json_output:
        return result.model_dump_json(indent=2)
    if mode.quiet:
        return render_quiet(result)
    return render_result(result, verbose=mode.verbose)
