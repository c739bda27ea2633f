"""Finding and calling folioctl plugins.

Plugins come from two places:

* installed distributions exposing a ``folioctl.plugins`` entry point
* single ``*.py`` files dropped into ``<site>/.folio/plugins/``

A local file may define any number of classes; each class with at least
one ``@hookimpl`` method is instantiated and registered.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from types import ModuleType
from typing import Any

import pluggy

from folioctl.plugins.hookspecs import FolioHookSpec

PROJECT_NAME = "folioctl"
ENTRY_POINT_GROUP = "folioctl.plugins"
LOCAL_MODULE_PREFIX = "folioctl_local_plugin_"

logger = logging.getLogger(__name__)


class PluginManager:
    """pluggy wrapper that knows folioctl's hook specs and plugin locations."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(FolioHookSpec)
        self._loaded = False

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Register entry-point plugins, then local files. Returns all plugin names."""
        count = self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        logger.debug("Loaded %d entry-point plugin(s)", count)
        if local_dir is not None and local_dir.is_dir():
            for py_file in sorted(local_dir.glob("*.py")):
                if not py_file.name.startswith("_"):
                    self._load_local(py_file)
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        self._pm.register(plugin, name=name or type(plugin).__name__)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or type(p).__name__ for p in self._pm.get_plugins()]

    def dispatch(self, hook_name: str, payload: dict[str, Any]) -> None:
        """Call *hook_name* on every plugin; unknown names are ignored, errors propagate."""
        caller = getattr(self._pm.hook, hook_name, None)
        if caller is not None:
            caller(**payload)

    # ------------------------------------------------------------------
    # Local plugins
    # ------------------------------------------------------------------

    def _load_local(self, py_file: Path) -> None:
        """Import *py_file* and register its plugin classes.

        A file that fails to import or a class that fails to construct is
        logged and skipped; the other plugins still load.
        """
        module = _import_file(py_file)
        if module is None:
            return
        for cls in _plugin_classes(module):
            name = f"{module.__name__}.{cls.__name__}"
            try:
                self.register_plugin(cls(), name=name)
            except Exception:
                logger.warning("Could not register plugin %s from %s", name, py_file, exc_info=True)
            else:
                logger.debug("Registered local plugin %s", name)


def _import_file(py_file: Path) -> ModuleType | None:
    module_name = LOCAL_MODULE_PREFIX + py_file.stem
    spec = importlib.util.spec_from_file_location(module_name, py_file)
    if spec is None or spec.loader is None:
        logger.warning("Not an importable plugin file: %s", py_file)
        return None
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception:
        logger.warning("Failed to import local plugin %s", py_file, exc_info=True)
        del sys.modules[module_name]
        return None
    return module


def _plugin_classes(module: ModuleType) -> Iterator[type]:
    """Classes defined in *module* (not imported into it) with hook implementations."""
    marker = f"{PROJECT_NAME}_impl"
    for _, cls in inspect.getmembers(module, inspect.isclass):
        if cls.__module__ != module.__name__:
            continue
        if any(
            callable(member) and getattr(member, marker, None)
            for attr, member in inspect.getmembers(cls)
            if not attr.startswith("_")
        ):
            yield cls
