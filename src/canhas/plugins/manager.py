"""Plugin discovery and loading.

Discovery: entry_points (pip-installed) in the ``canhas.plugins`` group,
plus plugins registered directly by the host application.
Capabilities: extra rules and extra URI parsers.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import Any

import pluggy

from canhas.plugins.hookspecs import CanHasHookSpec
from canhas.uri.parsers import register_uri_parser
from canhas.validators.registry import register_rule

PROJECT_NAME = "canhas"
ENTRY_POINT_GROUP = "canhas.plugins"

hookimpl = pluggy.HookimplMarker(PROJECT_NAME)

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery and feeds plugin registrations into the registries."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(CanHasHookSpec)
        self._loaded: bool = False

    def discover_and_load(self) -> list[str]:
        """Load entry-point plugins and apply every plugin's registrations.

        Returns a list of loaded plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        for plugin in self._pm.get_plugins():
            self._apply_registrations(plugin, self._name_of(plugin))
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        if self._loaded:
            self._apply_registrations(plugin, resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        """Unregister a plugin instance."""
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def get_plugins(self) -> list[object]:
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        return [self._name_of(p) for p in self._pm.get_plugins()]

    def _name_of(self, plugin: object) -> str:
        return self._pm.get_name(plugin) or plugin.__class__.__name__

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            if not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)

            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

    def _apply_registrations(self, plugin: object, plugin_name: str) -> None:
        self._collect(plugin, plugin_name, "register_rules", register_rule)
        self._collect(plugin, plugin_name, "register_uri_parsers", register_uri_parser)

    @staticmethod
    def _collect(
        plugin: object,
        plugin_name: str,
        hook_name: str,
        register: Callable[[str, Any], None],
    ) -> None:
        """Call one registration hook on *plugin* and feed the results to *register*."""
        hook = getattr(plugin, hook_name, None)
        if hook is None:
            return

        try:
            mapping = hook()
        except Exception:
            logger.warning(
                "Plugin %s failed in %s",
                plugin_name,
                hook_name,
                exc_info=True,
            )
            return

        if mapping is None:
            return
        if not isinstance(mapping, dict):
            logger.warning("Plugin %s returned non-dict from %s", plugin_name, hook_name)
            return

        for name, cls in mapping.items():
            try:
                register(name, cls)
            except (TypeError, ValueError):
                logger.warning(
                    "Skipping %s registration %r from plugin %s",
                    hook_name,
                    name,
                    plugin_name,
                    exc_info=True,
                )

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Check whether *cls* has any methods decorated with ``@hookimpl``.

        Pluggy's ``HookimplMarker("canhas")`` sets a ``canhas_impl``
        attribute on decorated methods.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, "canhas_impl", None):
                return True
        return False
