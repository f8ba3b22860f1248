# catalog_autocompleter/catalog/__init__.py
# catalog records and the collaborator-side helpers around them

from .models import Catalog, CatalogError, Category, Keyword, Product
from .keywords import generate_search_keywords, to_safe_id
from .matcher import resolve_category
from .loader import load_catalog, save_catalog
from .contribution import DEFAULT_CATEGORY, contribute_product

__all__ = [
    "Catalog",
    "CatalogError",
    "Category",
    "Keyword",
    "Product",
    "generate_search_keywords",
    "to_safe_id",
    "resolve_category",
    "load_catalog",
    "save_catalog",
    "DEFAULT_CATEGORY",
    "contribute_product",
]
