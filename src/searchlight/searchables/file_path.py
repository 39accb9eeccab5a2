"""Searchable backed by a file on disk (applications, documents, shortcuts).

Public building block for plugin authors: a plugin loaded through
`PluginsConfig.paths` that enumerates files returns these from `get_all()`,
and the host routes them by `FILE_PATH_EXECUTOR_ID` and
`FILE_PATH_LOCATION_OPENER_ID`.
"""

from __future__ import annotations

from searchlight.core.searchable import (
    Searchable,
    SearchResultItem,
    SearchResultItemIcon,
    SearchResultItemIconType,
)

FILE_PATH_EXECUTOR_ID = "FilePathExecutor"
FILE_PATH_LOCATION_OPENER_ID = "FilePathLocationOpener"


class FilePathSearchable(Searchable):
    """A file that is executed by opening it and located by revealing it."""

    def __init__(self, name: str, file_path: str, icon_file_path: str) -> None:
        self.name = name
        self.file_path = file_path
        self.icon_file_path = icon_file_path

    def to_search_result_item(self) -> SearchResultItem:
        return SearchResultItem(
            name=self.name,
            description=self.file_path,
            execution_argument=self.file_path,
            open_location_argument=self.file_path,
            icon=SearchResultItemIcon(
                icon=self.icon_file_path, type=SearchResultItemIconType.FILE_PATH
            ),
            executor_id=FILE_PATH_EXECUTOR_ID,
            location_opener_id=FILE_PATH_LOCATION_OPENER_ID,
        )
