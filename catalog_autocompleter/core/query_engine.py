# query_engine.py
"""
QueryEngine - ranked suggestions and category lookup over the live Index.

suggest(term):
 1. blank/None -> []
 2. prefix phase: folded keys starting with the folded query,
    ordered by (priority, key), capped at max_results
 3. short-circuit when the prefix phase already found enough, or the query is
    too short for typo matching to be meaningful
 4. fuzzy phase: remaining keys within the edit budget of the query,
    ordered by (priority, key), filling the rest of the cap
 5. prefix results always come before fuzzy ones

categories_for(term) is an exact lookup on the storage key (lowercase + trim,
accents kept). suggest() is how callers discover that exact spelling.

Both operations take one snapshot of the store up front and read only that,
so a concurrent rebuild can never leak into a half-finished answer.
"""

from __future__ import annotations

import logging
from typing import FrozenSet, List, Optional

from .distance import allowed_distance
from .index_builder import Index
from .index_store import IndexStore
from .normalizer import normalize, normalize_key

logger = logging.getLogger(__name__)

MAX_RESULTS = 10
PREFIX_SHORT_CIRCUIT = 5
MIN_FUZZY_QUERY_LENGTH = 3

_EMPTY: FrozenSet[str] = frozenset()


class QueryEngine:
    """Read-only query side of the autocompleter. Never raises on bad input."""

    def __init__(
        self,
        store: IndexStore,
        max_results: int = MAX_RESULTS,
        prefix_short_circuit: int = PREFIX_SHORT_CIRCUIT,
        min_fuzzy_query_length: int = MIN_FUZZY_QUERY_LENGTH,
    ) -> None:
        self.store = store
        self.max_results = max_results
        self.prefix_short_circuit = prefix_short_circuit
        self.min_fuzzy_query_length = min_fuzzy_query_length

    def suggest(self, term: Optional[str]) -> List[str]:
        """Up to max_results storage keys ranked for `term`."""
        return self.suggest_from(self.store.current(), term)

    def suggest_from(self, index: Index, term: Optional[str]) -> List[str]:
        """suggest() against a snapshot the caller already holds."""
        if not isinstance(term, str) or not term.strip():
            return []

        query = normalize(term)

        prefix = self._rank(index, index.prefix_keys(query), self.max_results)
        if len(prefix) >= self.prefix_short_circuit or len(query) < self.min_fuzzy_query_length:
            logger.debug("suggest %r: %d prefix hits (no fuzzy phase)", query, len(prefix))
            return prefix

        seen = set(prefix)
        candidates = [k for k in index.fuzzy_keys(query, allowed_distance(query)) if k not in seen]
        fuzzy = self._rank(index, candidates, self.max_results - len(prefix))
        logger.debug("suggest %r: %d prefix + %d fuzzy hits", query, len(prefix), len(fuzzy))
        return prefix + fuzzy

    def categories_for(self, term: Optional[str]) -> FrozenSet[str]:
        """Category ids of the exact storage key for `term`, or an empty set."""
        if not isinstance(term, str):
            return _EMPTY
        entry = self.store.current().get(normalize_key(term))
        return entry.category_ids if entry is not None else _EMPTY

    # helpers ---------------------------------------------------------------
    @staticmethod
    def _rank(index: Index, keys: List[str], limit: int) -> List[str]:
        """Order keys by (priority, key) and keep the first `limit`."""
        if limit <= 0 or not keys:
            return []
        keys = sorted(keys, key=lambda k: (index[k].priority, k))
        return keys[:limit]
