# keywords.py - search keyword and document id helpers for catalog records

from __future__ import annotations

import re
import unicodedata
from typing import List, Optional

# letters/digits kept in a search keyword, Portuguese accents included
_KEYWORD_STRIP_RE = re.compile(r"[^a-z0-9áéíóúâêîôûàèìòùçãõï]")
_SAFE_ID_STRIP_RE = re.compile(r"[^a-z0-9]")

MIN_KEYWORD_LENGTH = 3


def strip_accents(s: str) -> str:
    """Drop combining marks after NFD decomposition ("pão" -> "pao")."""
    decomposed = unicodedata.normalize("NFD", s)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def generate_search_keywords(name: Optional[str]) -> List[str]:
    """
    Search terms for a product name.
    Each word is lowercased and cleaned, words shorter than 3 characters are
    dropped, and both the accented and the accent-stripped spelling are kept:
      "Pão de Queijo" -> ["pão", "pao", "queijo"]
    Order is first-seen, without duplicates.
    """
    if not name or not name.strip():
        return []

    out: List[str] = []
    seen = set()
    for raw in name.lower().split():
        word = _KEYWORD_STRIP_RE.sub("", raw)
        if len(word) < MIN_KEYWORD_LENGTH:
            continue
        for variant in (word, strip_accents(word)):
            if variant not in seen:
                seen.add(variant)
                out.append(variant)
    return out


def to_safe_id(text: Optional[str]) -> Optional[str]:
    """Document id for free text: "Pão Caseiro" -> "paocaseiro"."""
    if text is None:
        return None
    return _SAFE_ID_STRIP_RE.sub("", strip_accents(text.lower())).strip()
