from pathlib import Path
from typing import Awaitable, Callable, List, Optional

import pytest

from searchlight.config import SearchEngineSettings
from searchlight.core.searchable import (
    Searchable,
    SearchResultItem,
    SearchResultItemIcon,
    SearchResultItemIconType,
)
from searchlight.plugins.base_plugin import SearchPlugin


def result_item_with_name(name: str) -> SearchResultItem:
    return SearchResultItem(
        name=name,
        description="description",
        execution_argument="execution argument",
        open_location_argument="open location argument",
        icon=SearchResultItemIcon(icon="icon", type=SearchResultItemIconType.URL),
        executor_id="DummyExecutor",
        location_opener_id="DummyLocationOpener",
    )


class DummySearchable(Searchable):
    def __init__(self, item: SearchResultItem) -> None:
        self.item = item

    def to_search_result_item(self) -> SearchResultItem:
        return self.item


def searchables_named(*names: str) -> List[Searchable]:
    return [DummySearchable(result_item_with_name(n)) for n in names]


class DummySearchPlugin(SearchPlugin):
    """Plugin whose behaviour is driven by callbacks and counts its calls."""

    plugin_id = "dummy"

    def __init__(
        self,
        temporary_folder_root: Path,
        *,
        plugin_id: Optional[str] = None,
        searchables: Optional[List[Searchable]] = None,
        on_rescan: Optional[Callable[[], Awaitable[None]]] = None,
        enabled: bool = True,
    ) -> None:
        if plugin_id is not None:
            self.plugin_id = plugin_id
        super().__init__(temporary_folder_root, enabled=enabled)
        self.searchables: List[Searchable] = list(searchables or [])
        self.on_rescan = on_rescan
        self.get_all_calls = 0
        self.rescan_calls = 0

    def get_all(self) -> List[Searchable]:
        self.get_all_calls += 1
        return list(self.searchables)

    async def rescan(self) -> None:
        self.rescan_calls += 1
        if self.on_rescan is not None:
            await self.on_rescan()


@pytest.fixture
def temp_folder(tmp_path: Path) -> Path:
    folder = tmp_path / "temp"
    folder.mkdir()
    return folder


@pytest.fixture
def engine_settings() -> SearchEngineSettings:
    return SearchEngineSettings(
        threshold=0.4,
        automatic_rescan_enabled=False,
        automatic_rescan_interval_in_seconds=0,
    )
