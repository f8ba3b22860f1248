# autocompleter.py
"""
AutoCompleter - application facade.

Purpose:
 - Own the IndexStore and the QueryEngine reading from it
 - Keep the last catalog snapshot handed in, for stats and contributions
 - Simple public API for CLI/TUI/tests:
     rebuild(categories, keywords, products), suggest(term), categories_for(term),
     warm_up(path), contribute_product(name, category_id), stats()

Reads never lock. Writers (rebuild, warm_up, contribute_product) build a new
Index off to the side and publish it with one swap; contributions also hold
a writer lock so two of them cannot drop each other's product.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple

from catalog_autocompleter.catalog.contribution import contribute_product
from catalog_autocompleter.catalog.loader import PathLike, load_catalog
from catalog_autocompleter.catalog.models import Catalog, CatalogError, Category, Keyword, Product
from catalog_autocompleter.utils.logger_utils import time_block

from .index_builder import build_index
from .index_store import IndexStore
from .query_engine import MAX_RESULTS, MIN_FUZZY_QUERY_LENGTH, PREFIX_SHORT_CIRCUIT, QueryEngine

logger = logging.getLogger(__name__)


class AutoCompleter:
    """Application facade over IndexStore + QueryEngine.
    Public API:
      - rebuild(categories, keywords, products) -> None
      - suggest(term) -> List[str]
      - categories_for(term) -> FrozenSet[str]
      - warm_up(path) -> bool
      - contribute_product(name, category_id=None) -> Product
      - stats() -> Dict[str, Any]
    """

    def __init__(
        self,
        store: Optional[IndexStore] = None,
        max_results: int = MAX_RESULTS,
        prefix_short_circuit: int = PREFIX_SHORT_CIRCUIT,
        min_fuzzy_query_length: int = MIN_FUZZY_QUERY_LENGTH,
    ):
        self.store = store or IndexStore()
        self.engine = QueryEngine(
            self.store,
            max_results=max_results,
            prefix_short_circuit=prefix_short_circuit,
            min_fuzzy_query_length=min_fuzzy_query_length,
        )
        self.catalog = Catalog()
        self._write_lock = threading.Lock()
        self._started_at = time.time()
        self._last_rebuild_s = 0.0

    @classmethod
    def from_config(cls, cfg) -> "AutoCompleter":
        return cls(
            max_results=int(cfg["max_suggestions"]),
            prefix_short_circuit=int(cfg["prefix_short_circuit"]),
            min_fuzzy_query_length=int(cfg["min_fuzzy_query_length"]),
        )

    # Index maintenance ---------------------------------------------------------
    def rebuild(
        self,
        categories: Iterable[Category],
        keywords: Iterable[Keyword],
        products: Iterable[Product],
    ) -> None:
        """Full rebuild from complete snapshots, then atomic publish."""
        self.publish(Catalog(tuple(categories), tuple(keywords), tuple(products)))

    def publish(self, catalog: Catalog) -> None:
        with time_block("index rebuild", logger) as tb:
            index = build_index(catalog.categories, catalog.keywords, catalog.products)
            self.store.replace(index)
        self.catalog = catalog
        self._last_rebuild_s = tb.elapsed
        logger.info("index now holds %d terms", len(index))

    def warm_up(self, path: PathLike) -> bool:
        """
        Load a catalog snapshot from `path` and rebuild.
        On malformed data the error is logged and the current index stays live.
        """
        logger.info(">>> starting autocomplete index warm-up from %s", path)
        try:
            catalog = load_catalog(path)
        except CatalogError as e:
            logger.error("failed to warm up autocomplete index: %s", e)
            return False
        with self._write_lock:
            self.publish(catalog)
        logger.info(">>> autocomplete index warm-up completed")
        return True

    def contribute_product(self, name: Optional[str], category_id: Optional[str] = None) -> Product:
        """Add a user product to the catalog and rebuild. ValueError on bad input."""
        with self._write_lock:
            updated, product = contribute_product(self.catalog, name, category_id)
            self.publish(updated)
        return product

    # Public query API ---------------------------------------------------------
    def suggest(self, term: Optional[str]) -> List[str]:
        return self.engine.suggest(term)

    def categories_for(self, term: Optional[str]) -> FrozenSet[str]:
        return self.engine.categories_for(term)

    def suggest_with_categories(self, term: Optional[str]) -> List[Tuple[str, List[str]]]:
        """suggest() plus each hit's sorted category ids, for display."""
        index = self.store.current()
        return [(key, sorted(index[key].category_ids)) for key in self.engine.suggest_from(index, term)]

    def stats(self) -> Dict[str, Any]:
        out: Dict[str, Any] = dict(self.catalog.counts())
        out["indexed_terms"] = len(self.store.current())
        out["last_rebuild_s"] = round(self._last_rebuild_s, 4)
        out["uptime_s"] = round(time.time() - self._started_at, 1)
        return out
