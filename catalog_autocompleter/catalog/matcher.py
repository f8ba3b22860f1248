# matcher.py - guess a category for a free-text product name

from __future__ import annotations

from typing import Iterable

from catalog_autocompleter.core.normalizer import normalize_key

from .models import Keyword


def resolve_category(product_name: str, keywords: Iterable[Keyword], fallback: str) -> str:
    """
    Category of the first keyword whose term appears in `product_name`
    (case-insensitive substring), else `fallback`.
    "Detergente Líquido Ypê" + [Keyword("detergente", "LIMPEZA")] -> "LIMPEZA"
    """
    name = normalize_key(product_name)
    if not name:
        return fallback
    for kw in keywords:
        term = normalize_key(kw.term)
        if term and term in name:
            return kw.category_id
    return fallback
