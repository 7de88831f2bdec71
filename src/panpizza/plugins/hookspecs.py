"""Pluggy hook specifications for panpizza events.

The reward/celebration behaviour of a front end hangs off these hooks; the
calculation pipeline never triggers anything itself.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("panpizza")
hookimpl = pluggy.HookimplMarker("panpizza")


class PanPizzaHookSpec:
    """Hook specifications for the panpizza plugin system."""

    @hookspec
    def post_recipe_ready(
        self,
        recipe: dict[str, float],
        pizza_count: int,
        unit_system: str,
    ) -> None:
        """Called after a recipe has been computed successfully.

        *recipe* is a private copy; implementations may not rely on
        mutating it having any effect.
        """
