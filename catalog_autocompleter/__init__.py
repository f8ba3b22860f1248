"""
catalog_autocompleter

Autocomplete engine for a shared shopping-list product catalog.
Contains:
 - text folding and edit distance (core.normalizer, core.distance)
 - index building and the atomically swapped live index (core.index_builder, core.index_store)
 - ranked suggestions and category lookup (core.query_engine)
 - the AutoCompleter facade used by the CLI and TUI
 - catalog records, JSON snapshots and product contribution (catalog)
"""

from .core import AutoCompleter, IndexStore, QueryEngine, build_index, normalize
from .catalog import Catalog, CatalogError, Category, Keyword, Product

__all__ = [
    "AutoCompleter",
    "IndexStore",
    "QueryEngine",
    "build_index",
    "normalize",
    "Catalog",
    "CatalogError",
    "Category",
    "Keyword",
    "Product",
]

__version__ = "0.1.0"
