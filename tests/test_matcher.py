import pytest

from searchlight.core.matcher import is_match, required_similarity, similarity

NAMES = [
    "Search Result Item 1",
    "Visual Studio Code",
    "Google Chrome",
    "Terminal",
    "System Preferences",
]


def test_substring_matches_in_exact_mode() -> None:
    assert is_match("result item", "Search Result Item 1", 0) is True
    assert is_match("item 2", "Search Result Item 1", 0) is False


def test_exact_mode_rejects_fuzzy_near_matches() -> None:
    assert is_match("srch rslt", "Search Result Item 1", 0) is False


def test_fuzzy_mode_accepts_abbreviations() -> None:
    assert is_match("srch rslt", "Search Result Item 1", 0.6) is True


def test_fuzzy_mode_rejects_unrelated_terms() -> None:
    assert is_match("whatever", "Search Result Item 1", 0.4) is False


def test_substring_always_matches_in_fuzzy_mode() -> None:
    assert similarity("Item 1", "Search Result Item 1") == 100.0
    assert is_match("Item 1", "Search Result Item 1", 0.01) is True


def test_matching_is_case_insensitive() -> None:
    for threshold in (0, 0.4, 0.6):
        for name in NAMES:
            assert is_match("sys", name, threshold) == is_match("SYS", name, threshold)
            assert is_match("chrme", name, threshold) == is_match("CHRME", name, threshold)


def test_whitespace_term_is_matched_literally() -> None:
    assert is_match(" ", "Google Chrome", 0) is True
    assert is_match(" ", "Terminal", 0) is False


def test_threshold_one_admits_everything() -> None:
    assert required_similarity(1.0) == 0.0
    assert is_match("zzz", "Terminal", 1.0) is True


@pytest.mark.parametrize("term", ["term", "vscode", "chrm", "pref sys", "xyz", "srch"])
def test_raising_threshold_never_removes_matches(term: str) -> None:
    thresholds = [0, 0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0]
    for name in NAMES:
        decisions = [is_match(term, name, t) for t in thresholds]
        # Once a name matches it keeps matching at every higher threshold
        first = decisions.index(True) if True in decisions else len(decisions)
        assert all(decisions[first:])


def test_required_similarity_is_clamped() -> None:
    assert required_similarity(-1.0) == 100.0
    assert required_similarity(2.0) == 0.0


def test_long_term_does_not_match_short_name_contained_in_it() -> None:
    assert is_match("whatever", "at", 0.4) is False
    assert is_match("visual studio code", "Code", 0.1) is False
    assert similarity("visual studio code", "Code") < 50.0


def test_long_term_still_matches_near_identical_name() -> None:
    # Term one character longer than the name
    assert is_match("terminals", "Terminal", 0.2) is True
