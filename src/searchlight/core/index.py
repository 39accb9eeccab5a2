"""In-memory index of searchables, replaced wholesale on every rescan.

Readers grab `SearchIndex.snapshot` once and work on that immutable value, so a
concurrent rescan can never expose a mix of two generations. Writers build a
complete new `IndexSnapshot` and publish it with a single assignment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence, Tuple

from searchlight.core.searchable import Searchable

Contribution = Tuple[str, Tuple[Searchable, ...]]


@dataclass(frozen=True, slots=True)
class IndexSnapshot:
    """One rescan generation of the index.

    Attributes
    ----------
    generation: int
        0 for the empty initial snapshot, incremented on every replacement.
    contributions: tuple[tuple[str, tuple[Searchable, ...]], ...]
        Per-plugin items in plugin-list order.
    searchables: tuple[Searchable, ...]
        All contributions flattened, in the same order.
    """

    generation: int = 0
    contributions: Tuple[Contribution, ...] = ()
    searchables: Tuple[Searchable, ...] = field(default=())

    @classmethod
    def build(
        cls, generation: int, contributions: Iterable[Tuple[str, Sequence[Searchable]]]
    ) -> IndexSnapshot:
        frozen = tuple((plugin_id, tuple(items)) for plugin_id, items in contributions)
        flattened = tuple(item for _, items in frozen for item in items)
        return cls(generation=generation, contributions=frozen, searchables=flattened)

    def contribution(self, plugin_id: str) -> Tuple[Searchable, ...]:
        """Items contributed by `plugin_id` in this generation (empty if none)."""
        for contributor, items in self.contributions:
            if contributor == plugin_id:
                return items
        return ()

    def __len__(self) -> int:
        return len(self.searchables)


class SearchIndex:
    """Holder of the current `IndexSnapshot`. Owned exclusively by the engine."""

    def __init__(self) -> None:
        self._snapshot = IndexSnapshot()

    @property
    def snapshot(self) -> IndexSnapshot:
        return self._snapshot

    def replace(self, contributions: Iterable[Tuple[str, Sequence[Searchable]]]) -> IndexSnapshot:
        """Publish a new generation built from `contributions` and return it."""
        snapshot = IndexSnapshot.build(self._snapshot.generation + 1, contributions)
        self._snapshot = snapshot
        return snapshot
