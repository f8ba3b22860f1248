# models.py
"""
Catalog records handed to the index builder.

Records are frozen dataclasses; from_dict() accepts the camelCase documents
the catalog database stores (categoryId, productName, searchKeywords,
isOfficial, keyword) as well as the snake_case attribute names.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .keywords import generate_search_keywords


class CatalogError(ValueError):
    """Malformed catalog data (bad JSON, missing required fields)."""


def _pick(data: Mapping[str, Any], *names: str, default: Any = None) -> Any:
    for n in names:
        if n in data and data[n] is not None:
            return data[n]
    return default


def _require(data: Mapping[str, Any], kind: str, *names: str) -> Any:
    value = _pick(data, *names)
    if value is None:
        raise CatalogError(f"{kind} record missing '{names[0]}': {dict(data)!r}")
    return value


@dataclass(frozen=True)
class Category:
    id: str
    priority: int = 0
    name: str = ""
    classification: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Category":
        cid = _require(data, "category", "id", "categoryId")
        try:
            priority = int(_pick(data, "priority", default=0))
        except (TypeError, ValueError) as e:
            raise CatalogError(f"category {cid!r} has a non-integer priority") from e
        if priority < 0:
            raise CatalogError(f"category {cid!r} has a negative priority ({priority})")
        return cls(
            id=str(cid),
            priority=priority,
            name=str(_pick(data, "name", default="")),
            classification=str(_pick(data, "classification", default="")),
        )


@dataclass(frozen=True)
class Keyword:
    term: Optional[str]
    category_id: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Keyword":
        term = _pick(data, "keyword", "term")
        return cls(
            term=None if term is None else str(term),
            category_id=str(_require(data, "keyword", "categoryId", "category_id")),
        )


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    category_id: str
    is_official: bool = False
    search_terms: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Product":
        terms = _pick(data, "searchKeywords", "search_terms", default=())
        if not isinstance(terms, (list, tuple)):
            raise CatalogError(f"product {data.get('id')!r}: searchKeywords must be a list")
        return cls(
            id=str(_require(data, "product", "id")),
            name=str(_pick(data, "productName", "name", default="")),
            category_id=str(_require(data, "product", "categoryId", "category_id")),
            is_official=bool(_pick(data, "isOfficial", "is_official", default=False)),
            search_terms=tuple(str(t) for t in terms),
        )

    @classmethod
    def create_user_contributed(cls, name: str, category_id: str) -> "Product":
        """New non-official product with a generated id and search terms."""
        return cls(
            id=str(uuid.uuid4()),
            name=name,
            category_id=category_id,
            is_official=False,
            search_terms=tuple(generate_search_keywords(name)),
        )


@dataclass(frozen=True)
class Catalog:
    """One consistent-enough snapshot of the three catalog collections."""

    categories: Tuple[Category, ...] = field(default_factory=tuple)
    keywords: Tuple[Keyword, ...] = field(default_factory=tuple)
    products: Tuple[Product, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Catalog":
        if not isinstance(data, Mapping):
            raise CatalogError("catalog document must be a JSON object")
        return cls(
            categories=tuple(Category.from_dict(d) for d in _records(data, "categories")),
            keywords=tuple(Keyword.from_dict(d) for d in _records(data, "keywords")),
            products=tuple(Product.from_dict(d) for d in _records(data, "products")),
        )

    def category_ids(self) -> List[str]:
        return [c.id for c in self.categories]

    def counts(self) -> Dict[str, int]:
        official = sum(1 for p in self.products if p.is_official)
        return {
            "categories": len(self.categories),
            "keywords": len(self.keywords),
            "products": len(self.products),
            "official_products": official,
            "user_products": len(self.products) - official,
        }


def _records(data: Mapping[str, Any], name: str) -> List[Mapping[str, Any]]:
    items = data.get(name) or []
    if not isinstance(items, list) or not all(isinstance(i, Mapping) for i in items):
        raise CatalogError(f"'{name}' must be a list of objects")
    return items
