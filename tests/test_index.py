from searchlight.core.index import IndexSnapshot, SearchIndex

from conftest import searchables_named


def test_new_index_is_empty_generation_zero() -> None:
    index = SearchIndex()
    assert index.snapshot.generation == 0
    assert index.snapshot.searchables == ()
    assert len(index.snapshot) == 0


def test_replace_flattens_contributions_in_order() -> None:
    first = searchables_named("a1", "a2")
    second = searchables_named("b1")
    index = SearchIndex()

    snapshot = index.replace([("a", first), ("b", second)])

    assert snapshot is index.snapshot
    assert snapshot.generation == 1
    assert list(snapshot.searchables) == first + second
    assert list(snapshot.contribution("a")) == first
    assert snapshot.contribution("missing") == ()


def test_replace_leaves_previous_snapshot_untouched() -> None:
    index = SearchIndex()
    old = index.replace([("a", searchables_named("old"))])
    items = searchables_named("new")

    new = index.replace([("a", items)])

    assert new.generation == old.generation + 1
    assert [s.to_search_result_item().name for s in old.searchables] == ["old"]
    assert [s.to_search_result_item().name for s in new.searchables] == ["new"]


def test_snapshot_does_not_alias_caller_lists() -> None:
    items = searchables_named("x")
    snapshot = IndexSnapshot.build(1, [("p", items)])
    items.clear()
    assert len(snapshot) == 1
