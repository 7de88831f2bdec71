"""Plugin manager for the ``post_recipe_ready`` reward hook.

Installed packages contribute plugins through the ``panpizza.plugins``
entry-point group. An entry point may name a plugin object or a class; a
class is instantiated with no arguments.
"""

from __future__ import annotations

import inspect
import logging
from importlib.metadata import entry_points

import pluggy

from panpizza.plugins.hookspecs import PanPizzaHookSpec

PROJECT_NAME = "panpizza"
ENTRY_POINT_GROUP = "panpizza.plugins"

logger = logging.getLogger(__name__)


class PluginManager(pluggy.PluginManager):
    """pluggy manager preloaded with the panpizza hook specifications."""

    def __init__(self) -> None:
        super().__init__(PROJECT_NAME)
        self.add_hookspecs(PanPizzaHookSpec)

    def discover_and_load(self) -> list[str]:
        """Register every installed plugin and return the names loaded.

        A plugin that fails to import or instantiate is skipped with a
        warning so one broken package cannot stop a recipe from printing.
        """
        loaded: list[str] = []
        for ep in entry_points(group=ENTRY_POINT_GROUP):
            if self.get_plugin(ep.name) is not None or self.is_blocked(ep.name):
                continue
            try:
                plugin = ep.load()
                if inspect.isclass(plugin):
                    plugin = plugin()
            except Exception:
                logger.warning("Skipping plugin %s", ep.name, exc_info=True)
                continue
            self.register(plugin, name=ep.name)
            loaded.append(ep.name)
        return loaded

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register *plugin* under *name*, defaulting to its class name."""
        resolved = name or type(plugin).__name__
        self.register(plugin, name=resolved)
        logger.debug("Registered plugin: %s", resolved)

    def list_plugin_names(self) -> list[str]:
        return [name for name, plugin in self.list_name_plugin() if plugin is not None]
