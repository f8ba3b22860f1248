# tests/test_matcher.py
from catalog_autocompleter.catalog.matcher import resolve_category

from conftest import kw

KEYWORDS = [kw("Detergente", "LIMPEZA"), kw(None, "ALIMENTOS"), kw("  ", "ALIMENTOS"), kw("Café", "BEBIDAS")]


def test_substring_match_is_case_insensitive():
    assert resolve_category("Detergente Líquido Ypê", KEYWORDS, "OUTROS") == "LIMPEZA"
    assert resolve_category("CAFÉ TORRADO", KEYWORDS, "OUTROS") == "BEBIDAS"


def test_first_matching_keyword_wins():
    keywords = [kw("pão", "PADARIA"), kw("queijo", "LATICINIOS")]
    assert resolve_category("Pão de Queijo", keywords, "OUTROS") == "PADARIA"


def test_fallback_when_nothing_matches():
    assert resolve_category("Parafuso", KEYWORDS, "OUTROS") == "OUTROS"
    assert resolve_category("", KEYWORDS, "OUTROS") == "OUTROS"
    assert resolve_category("Parafuso", [], "OUTROS") == "OUTROS"


def test_accents_must_match():
    # matching is on the storage form, accents kept
    assert resolve_category("Cafe Torrado", KEYWORDS, "OUTROS") == "OUTROS"
