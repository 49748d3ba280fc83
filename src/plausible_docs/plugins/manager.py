"""Plugin discovery and hook dispatch for head markup contributors.

Plugins come from two places, in this order:

1. the ``plausible_docs.plugins`` entry-point group of installed packages;
2. ``*.py`` files in a project-local directory.

Either source may hand over a plugin class or an instance. Classes are
instantiated with no arguments before registration, since pluggy cannot
dispatch to an unbound ``self``. A plugin that fails to import or to
instantiate is logged and skipped; the build goes on without it.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from importlib.metadata import entry_points
from pathlib import Path

import pluggy

from plausible_docs.plugins.hookspecs import DocsHookSpec

PROJECT_NAME = "plausible_docs"
ENTRY_POINT_GROUP = "plausible_docs.plugins"
LOCAL_MODULE_PREFIX = "plausible_docs_local_plugin_"

logger = logging.getLogger(__name__)


class PluginManager:
    """Registry of plugins implementing :class:`DocsHookSpec`."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(DocsHookSpec)

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Load entry-point plugins, then *local_dir* plugins; return all names."""
        for ep in entry_points(group=ENTRY_POINT_GROUP):
            if self._pm.has_plugin(ep.name):
                continue
            try:
                candidate = ep.load()
            except Exception:
                logger.warning(
                    "Skipping plugin entry point %s (%s): import failed",
                    ep.name,
                    ep.value,
                    exc_info=True,
                )
                continue
            self._register_candidate(candidate, ep.name)

        if local_dir is not None and local_dir.is_dir():
            for py_file in sorted(local_dir.glob("*.py")):
                if not py_file.name.startswith("_"):
                    self._load_local_file(py_file)

        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register an already-built plugin object (e.g. the built-in one)."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def _register_candidate(self, candidate: object, name: str) -> bool:
        """Instantiate *candidate* if it is a class, then register it."""
        if inspect.isclass(candidate):
            try:
                candidate = candidate()
            except Exception:
                logger.warning("Skipping plugin %s: instantiation failed", name, exc_info=True)
                return False
        self.register_plugin(candidate, name=name)
        return True

    def _load_local_file(self, py_file: Path) -> None:
        module_name = LOCAL_MODULE_PREFIX + py_file.stem
        spec = importlib.util.spec_from_file_location(module_name, py_file)
        if spec is None or spec.loader is None:
            logger.warning("Skipping local plugin %s: not importable", py_file)
            return
        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception:
            sys.modules.pop(module_name, None)
            logger.warning("Skipping local plugin %s: import failed", py_file, exc_info=True)
            return

        for attr_name, obj in inspect.getmembers(module, inspect.isclass):
            if obj.__module__ == module_name and _declares_hooks(obj):
                self._register_candidate(obj, f"{module_name}.{attr_name}")


def _declares_hooks(cls: type) -> bool:
    """Whether any public method of *cls* carries a ``plausible_docs`` hookimpl mark."""
    marker = f"{PROJECT_NAME}_impl"
    return any(
        getattr(getattr(cls, name, None), marker, None) is not None
        for name in dir(cls)
        if not name.startswith("_")
    )
