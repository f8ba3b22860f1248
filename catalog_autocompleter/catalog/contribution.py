# contribution.py
"""
User product contribution on an in-memory Catalog.

Steps:
 1. validate the name (required, trimmed)
 2. reject names that already exist
 3. resolve the category (explicit id must exist; otherwise guess from
    keywords, falling back to DEFAULT_CATEGORY)
 4. create a non-official product with generated search keywords
 5. record each new search keyword as a Keyword under that category

Returns a new Catalog; the input is left untouched so the caller can publish
it (and rebuild the index) in one step.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from .keywords import to_safe_id
from .matcher import resolve_category
from .models import Catalog, Keyword, Product

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "OUTROS"


def validate_product_name(name: Optional[str]) -> str:
    if name is None or not name.strip():
        raise ValueError("Product name is required")
    return name.strip()


def product_exists(catalog: Catalog, name: str) -> bool:
    return any(p.name == name for p in catalog.products)


def resolve_category_id(catalog: Catalog, name: str, category_id: Optional[str]) -> str:
    if category_id is None or not category_id.strip():
        resolved = resolve_category(name, catalog.keywords, DEFAULT_CATEGORY)
        logger.info("no category given for %r, using %s", name, resolved)
        return resolved
    category_id = category_id.strip()
    if category_id not in catalog.category_ids():
        raise ValueError(f"Category '{category_id}' does not exist")
    return category_id


def contribute_product(catalog: Catalog, name: Optional[str], category_id: Optional[str] = None) -> Tuple[Catalog, Product]:
    """Add a user-contributed product. Raises ValueError on validation failure."""
    name = validate_product_name(name)
    if product_exists(catalog, name):
        raise ValueError("Product already exists in the system")

    category_id = resolve_category_id(catalog, name, category_id)
    product = Product.create_user_contributed(name, category_id)
    logger.info("new product %r (%s) keywords=%s", name, product.id, list(product.search_terms))

    known = {to_safe_id(k.term) for k in catalog.keywords if k.term}
    new_keywords = []
    for term in product.search_terms:
        safe = to_safe_id(term)
        if safe and safe not in known:
            known.add(safe)
            new_keywords.append(Keyword(term=term, category_id=category_id))

    updated = Catalog(
        categories=catalog.categories,
        keywords=catalog.keywords + tuple(new_keywords),
        products=catalog.products + (product,),
    )
    return updated, product
