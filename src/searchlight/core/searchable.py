"""Result records and the searchable capability.

Anything a plugin exposes to the engine implements `Searchable`, which renders
itself into an immutable `SearchResultItem` at query time. The engine only
looks at `SearchResultItem.name`; every other field is routed untouched to
external executors and location openers.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class SearchResultItemIconType(str, Enum):
    """How the `icon` value of a `SearchResultItemIcon` should be interpreted."""

    FILE_PATH = "FilePath"
    URL = "Url"
    DATA_URL = "DataUrl"


@dataclass(frozen=True, slots=True)
class SearchResultItemIcon:
    """Icon descriptor attached to a result item."""

    icon: str
    type: SearchResultItemIconType


@dataclass(frozen=True, slots=True)
class SearchResultItem:
    """Immutable projection of a `Searchable` at query time.

    Attributes
    ----------
    name: str
        Display name; the only field used for matching.
    description: str
        Secondary text shown beneath the name.
    execution_argument: str
        Argument handed to the executor identified by `executor_id`.
    open_location_argument: str
        Argument handed to the location opener identified by `location_opener_id`.
    icon: SearchResultItemIcon
        Icon descriptor.
    executor_id: str
        Opaque routing token for the executor.
    location_opener_id: str
        Opaque routing token for the location opener.
    """

    name: str
    description: str
    execution_argument: str
    open_location_argument: str
    icon: SearchResultItemIcon
    executor_id: str
    location_opener_id: str


class Searchable(ABC):
    """An item that can render itself as a search result."""

    @abstractmethod
    def to_search_result_item(self) -> SearchResultItem:
        """Return the result record for this item."""
        raise NotImplementedError
