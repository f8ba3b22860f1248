# normalizer.py
# Text folding used for matching user queries against catalog terms.
# Two flavours:
#  - normalize_key(): lowercase + trim, the storage key of the index
#  - normalize(): storage key + NFD + diacritic removal, used only for matching

from __future__ import annotations

import unicodedata
from typing import Optional


def normalize_key(s: Optional[str]) -> str:
    """Storage key for a term: lowercase + trim. Accents are kept."""
    if not s:
        return ""
    return s.lower().strip()


def normalize(s: Optional[str]) -> str:
    """
    Accent-folded form of `s` for matching.
    Lowercases, trims, decomposes (NFD) and drops combining marks, so
    "Maçã", "MAÇÁ" and "maca" all fold to "maca".
    Total and idempotent: normalize(normalize(x)) == normalize(x).
    """
    key = normalize_key(s)
    if not key:
        return ""
    decomposed = unicodedata.normalize("NFD", key)
    folded = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    # a dropped mark can expose whitespace at either end ("a ́")
    return folded.strip()
