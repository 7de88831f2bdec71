"""Extension layer — plugin system via pluggy.

INVARIANT: Plugin failures are warnings, never errors.
"""

from panpizza.plugins.hookspecs import hookimpl
from panpizza.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
