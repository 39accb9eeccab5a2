"""Exact and fuzzy matching of a search term against a result name.

Matching is case-insensitive. A term that occurs as a contiguous substring of
the name always matches. With a positive threshold, fuzzy matching compares
the term to the best-aligned part of the name using rapidfuzz's partial ratio
(0-100), or to the whole name with the plain ratio when the term is the longer
string, and admits the name when that score reaches `(1 - threshold) * 100`.
Raising the threshold lowers the bar, so it can only ever add matches.

The empty term is not special-cased here; callers decide what an empty query
means.
"""

from __future__ import annotations

from rapidfuzz import fuzz

MAX_SIMILARITY = 100.0


def _fold(text: str) -> str:
    return text.casefold()


def required_similarity(threshold: float) -> float:
    """Minimum similarity (0-100) a name must reach for the given threshold."""
    clamped = min(max(threshold, 0.0), 1.0)
    return (1.0 - clamped) * MAX_SIMILARITY


def _score(folded_term: str, folded_name: str, score_cutoff: float = 0.0) -> float:
    # partial_ratio aligns the shorter string inside the longer one, so the
    # term must be the shorter side; a term longer than the name is scored whole
    if len(folded_term) > len(folded_name):
        return float(fuzz.ratio(folded_term, folded_name, score_cutoff=score_cutoff))
    return float(fuzz.partial_ratio(folded_term, folded_name, score_cutoff=score_cutoff))


def similarity(term: str, name: str) -> float:
    """Case-insensitive fuzzy similarity of `term` against `name` (0-100).

    Directional: a name that merely occurs inside a longer term does not
    score as a full match.
    """
    folded_term, folded_name = _fold(term), _fold(name)
    if folded_term in folded_name:
        return MAX_SIMILARITY
    return _score(folded_term, folded_name)


def is_match(term: str, name: str, threshold: float) -> bool:
    """Return True if `name` matches `term` under `threshold`.

    A threshold of 0 (or below) means exact mode: substring containment only.
    """
    folded_term, folded_name = _fold(term), _fold(name)
    if folded_term in folded_name:
        return True
    if threshold <= 0:
        return False
    cutoff = required_similarity(threshold)
    # rapidfuzz returns 0 for anything under score_cutoff
    return _score(folded_term, folded_name, score_cutoff=cutoff) >= cutoff
