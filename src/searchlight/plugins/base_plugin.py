"""Base interface for search plugins.

A plugin is an independent data source (installed applications, files, shell
commands, ...) that contributes `Searchable` items to the engine's index.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from searchlight.core.searchable import Searchable


class SearchPlugin(ABC):
    """Abstract search plugin.

    Implementations should be safe to construct without side effects and must
    not perform I/O until `rescan()` is awaited. `get_all()` returns whatever the
    last rescan produced and must never block.

    Subclasses set `plugin_id` to a stable, unique identifier. The temporary
    folder is owned exclusively by the plugin; only the engine may delete it.
    """

    plugin_id: str = ""

    def __init__(self, temporary_folder_root: Path, *, enabled: bool = True) -> None:
        if not self.plugin_id:
            raise ValueError(f"{type(self).__name__} must define a non-empty plugin_id")
        self._temporary_folder_root = Path(temporary_folder_root)
        self._enabled = enabled

    @property
    def id(self) -> str:
        return self.plugin_id

    def is_enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    def get_temporary_folder_path(self) -> Path:
        return self._temporary_folder_root / self.plugin_id

    @abstractmethod
    def get_all(self) -> List[Searchable]:
        """Return the current full set of searchables without doing any I/O."""
        raise NotImplementedError

    @abstractmethod
    async def rescan(self) -> None:
        """Refresh the plugin's backing data. May do arbitrary I/O and may fail."""
        raise NotImplementedError
