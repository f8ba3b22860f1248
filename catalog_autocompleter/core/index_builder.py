# index_builder.py
"""
Index builder - turns full catalog snapshots into a fresh, read-only Index.

The Index maps each storage key (lowercase + trimmed term) to an IndexEntry:
  - priority: lowest category priority seen for the term (lower ranks first)
  - category_ids: union of every category the term was seen under

Besides the mapping, an Index carries two lookup structures over the
accent-folded keys, a Trie for the prefix phase and a BKTree for the fuzzy
phase. Everything is built off to the side and never mutated afterwards, so
publishing an Index is a single reference swap (see index_store.py).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Set, Tuple

from .bktree import BKTree
from .normalizer import normalize, normalize_key
from .trie import Trie

logger = logging.getLogger(__name__)

# priority used when a term's category is missing from the category snapshot
DEFAULT_PRIORITY = 99


@dataclass(frozen=True)
class IndexEntry:
    priority: int
    category_ids: FrozenSet[str]
    folded: str  # normalize(key), cached for matching


class Index(Mapping[str, IndexEntry]):
    """
    Immutable term index. Behaves as a read-only Mapping of
    storage key -> IndexEntry, plus prefix/fuzzy lookups on folded keys.
    """

    __slots__ = ("_entries", "_trie", "_bktree")

    def __init__(self, entries: Optional[Dict[str, IndexEntry]] = None) -> None:
        entries = dict(entries or {})
        trie = Trie()
        bktree = BKTree()
        for key, entry in entries.items():
            trie.insert(entry.folded, key)
            bktree.insert(entry.folded, key)
        self._entries = MappingProxyType(entries)
        self._trie = trie
        self._bktree = bktree

    @classmethod
    def empty(cls) -> "Index":
        return cls()

    # Mapping protocol ----------------------------------------------------
    def __getitem__(self, key: str) -> IndexEntry:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Index(terms={len(self._entries)})"

    # lookups on folded keys ------------------------------------------------
    def prefix_keys(self, folded_prefix: str) -> List[str]:
        """Storage keys whose folded form starts with `folded_prefix`."""
        return self._trie.keys_with_prefix(folded_prefix)

    def fuzzy_keys(self, folded_query: str, max_dist: int) -> List[str]:
        """Storage keys whose folded form is within `max_dist` edits."""
        return [k for k, _d in self._bktree.query(folded_query, max_dist)]


# building -------------------------------------------------------------------

def _priority_lookup(categories: Iterable) -> Dict[str, int]:
    """category id -> priority; first occurrence wins on duplicate ids."""
    lookup: Dict[str, int] = {}
    for cat in categories:
        if cat.id not in lookup:
            lookup[cat.id] = int(cat.priority)
    return lookup


def _merge(work: Dict[str, Tuple[int, Set[str]]], term: Optional[str], priority: int, category_id: str) -> None:
    """Fold one (term, priority, category) observation into the working map."""
    if not term or not term.strip():
        return
    key = normalize_key(term)
    existing = work.get(key)
    if existing is None:
        work[key] = (priority, {category_id})
    else:
        existing[1].add(category_id)
        if priority < existing[0]:
            work[key] = (priority, existing[1])


def build_index(categories: Iterable, keywords: Iterable, products: Iterable) -> Index:
    """
    Build a complete replacement Index from full snapshots.

    categories: objects with .id and .priority
    keywords:   objects with .term and .category_id
    products:   objects with .category_id and .search_terms

    Pure: no I/O, inputs are not modified. Blank terms are skipped and
    unknown category ids fall back to DEFAULT_PRIORITY.
    """
    priority_of = _priority_lookup(categories)
    work: Dict[str, Tuple[int, Set[str]]] = {}

    n_keywords = 0
    for kw in keywords:
        n_keywords += 1
        _merge(work, kw.term, priority_of.get(kw.category_id, DEFAULT_PRIORITY), kw.category_id)

    n_products = 0
    for prod in products:
        n_products += 1
        priority = priority_of.get(prod.category_id, DEFAULT_PRIORITY)
        for term in prod.search_terms or ():
            _merge(work, term, priority, prod.category_id)

    entries = {
        key: IndexEntry(priority=prio, category_ids=frozenset(ids), folded=normalize(key))
        for key, (prio, ids) in work.items()
    }
    logger.debug(
        "built index: %d terms from %d categories, %d keywords, %d products",
        len(entries), len(priority_of), n_keywords, n_products,
    )
    return Index(entries)
