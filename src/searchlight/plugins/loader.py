"""Load search plugins from configured import paths.

Each path has the form ``"package.module:ClassName"``; the class must subclass
`SearchPlugin` and is constructed with the shared temporary folder root.
"""
from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Iterable, List

from searchlight.exceptions import ConfigError
from searchlight.plugins.base_plugin import SearchPlugin

logger = logging.getLogger(__name__)


def load_plugin(import_path: str, temporary_folder_root: Path) -> SearchPlugin:
    """Import and instantiate a single plugin.

    Raises `ConfigError` when the path is malformed, the import fails or the
    target is not a `SearchPlugin` subclass.
    """
    module_name, sep, class_name = import_path.strip().partition(":")
    if not sep or not module_name or not class_name:
        raise ConfigError(
            f"Invalid plugin path '{import_path}'. Expected 'package.module:ClassName'."
        )
    try:
        module = importlib.import_module(module_name)
    except ImportError as err:
        raise ConfigError(f"Cannot import plugin module '{module_name}': {err}") from err

    plugin_cls = getattr(module, class_name, None)
    if not isinstance(plugin_cls, type) or not issubclass(plugin_cls, SearchPlugin):
        raise ConfigError(f"'{import_path}' does not name a SearchPlugin subclass")
    return plugin_cls(temporary_folder_root)


def load_plugins(import_paths: Iterable[str], temporary_folder_root: Path) -> List[SearchPlugin]:
    """Load every configured plugin, rejecting duplicate plugin ids."""
    plugins: List[SearchPlugin] = []
    seen: set[str] = set()
    for path in import_paths:
        plugin = load_plugin(path, temporary_folder_root)
        if plugin.id in seen:
            raise ConfigError(f"Duplicate plugin id '{plugin.id}' (from '{path}')")
        seen.add(plugin.id)
        plugins.append(plugin)
        logger.debug("Loaded plugin '%s' from %s", plugin.id, path)
    return plugins
