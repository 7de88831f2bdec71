"""Colour theme and console factory for terminal output.

Renderers print into a console created here and take the text back with
``Console.capture``; colour is only emitted when stdout is a terminal.
"""

from __future__ import annotations

from rich.console import Console
from rich.theme import Theme

RENDER_WIDTH = 100

PANPIZZA_THEME = Theme(
    {
        "pp.ok": "bold green",
        "pp.error": "bold red",
        "pp.op": "bold cyan",
        "pp.key": "dim",
        "pp.path": "dim",
        "pp.title": "bold",
        "pp.grams": "magenta",
        "pp.small": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int = RENDER_WIDTH) -> Console:
    """Console used to render one result."""
    return Console(theme=PANPIZZA_THEME, no_color=no_color, highlight=False, width=width)
