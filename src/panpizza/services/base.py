"""Shared plumbing for services that announce their results to plugins."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from panpizza.plugins.manager import PluginManager

log = structlog.get_logger(__name__)


class BaseService:
    """Holds the optional plugin manager a service reports to.

    The calculation pipeline never talks to plugins; services do, and only
    after an operation has succeeded.
    """

    def __init__(self, plugin_manager: PluginManager | None = None) -> None:
        self._plugins = plugin_manager

    def _notify(self, hook_name: str, warnings: list[str], **payload: Any) -> None:
        """Call *hook_name* on every plugin, recording failures in *warnings*."""
        if self._plugins is None:
            return
        hook = getattr(self._plugins.hook, hook_name, None)
        if hook is None:
            return
        try:
            hook(**payload)
        except Exception as exc:
            log.debug("plugin.failed", hook=hook_name, exc_info=True)
            warnings.append(f"Plugin hook {hook_name} failed: {exc}")
