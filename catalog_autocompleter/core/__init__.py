"""
catalog_autocompleter.core

The suggestion engine:
 - Normalizer / edit distance
 - Index builder (Trie + BKTree over folded terms) and IndexStore
 - QueryEngine (prefix phase, fuzzy fallback, priority ordering)
 - AutoCompleter facade
"""

from .normalizer import normalize, normalize_key
from .distance import edit_distance, is_fuzzy_match
from .index_builder import DEFAULT_PRIORITY, Index, IndexEntry, build_index
from .index_store import IndexStore
from .query_engine import QueryEngine
from .autocompleter import AutoCompleter

__all__ = [
    "normalize",
    "normalize_key",
    "edit_distance",
    "is_fuzzy_match",
    "DEFAULT_PRIORITY",
    "Index",
    "IndexEntry",
    "build_index",
    "IndexStore",
    "QueryEngine",
    "AutoCompleter",
]
