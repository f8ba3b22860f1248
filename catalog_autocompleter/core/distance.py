# distance.py
# Levenshtein edit distance for typo-tolerant matching.
# Keeps one DP row sized to the shorter string; with a cutoff it gives up as
# soon as every cell of a row is already past the limit.

from __future__ import annotations

from typing import Optional


def edit_distance(a: str, b: str, max_dist: Optional[int] = None) -> int:
    """
    Levenshtein distance between two already-normalized strings.
    With `max_dist`, anything farther than max_dist comes back as
    max_dist + 1 instead of the exact value.
    """
    if a == b:
        return 0
    longer, shorter = (a, b) if len(a) >= len(b) else (b, a)
    over = (max_dist + 1) if max_dist is not None else None

    if over is not None and len(longer) - len(shorter) > max_dist:
        return over
    if not shorter:
        return len(longer)

    # row[j] = distance between the current prefix of `longer` and shorter[:j]
    row = list(range(len(shorter) + 1))
    for i, lc in enumerate(longer, 1):
        diag, row[0] = row[0], i
        for j, sc in enumerate(shorter, 1):
            above = row[j]
            row[j] = min(
                above + 1,  # drop lc
                row[j - 1] + 1,  # add sc
                diag + (lc != sc),  # keep or swap
            )
            diag = above
        if over is not None and min(row) > max_dist:
            return over

    if over is not None and row[-1] > max_dist:
        return over
    return row[-1]


def allowed_distance(query: str) -> int:
    """Edit budget for a query: longer queries tolerate one more typo."""
    return 2 if len(query) > 4 else 1


def is_fuzzy_match(query: str, candidate: str) -> bool:
    """True if `candidate` is within the edit budget of `query`."""
    allowed = allowed_distance(query)
    return edit_distance(query, candidate, allowed) <= allowed
