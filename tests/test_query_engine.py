# tests/test_query_engine.py
# ranking, short-circuit and lookup behaviour of suggest()/categories_for()

import pytest

from catalog_autocompleter.catalog.models import Category
from catalog_autocompleter.core.index_builder import build_index
from catalog_autocompleter.core.index_store import IndexStore
from catalog_autocompleter.core.query_engine import QueryEngine

from conftest import kw, product


def engine_for(categories, keywords, products=(), **kwargs):
    return QueryEngine(IndexStore(build_index(categories, keywords, products)), **kwargs)


def test_empty_index_gives_empty_results():
    qe = engine_for([], [])
    assert qe.suggest("anything") == []
    assert qe.categories_for("anything") == frozenset()


@pytest.mark.parametrize("term", ["", None, "   ", "\t\n"])
def test_blank_terms(categories, term):
    qe = engine_for(categories, [kw("Arroz", "ALIMENTOS")])
    assert qe.suggest(term) == []


def test_non_string_input_degrades_to_empty(categories):
    qe = engine_for(categories, [kw("Arroz", "ALIMENTOS")])
    assert qe.suggest(42) == []
    assert qe.categories_for(42) == frozenset()
    assert qe.categories_for(None) == frozenset()


def test_accent_folding(categories):
    qe = engine_for(categories, [kw("Maçã", "ALIMENTOS")])
    assert "maçã" in qe.suggest("maca")
    assert "maçã" in qe.suggest("MAÇÁ")
    assert "maçã" in qe.suggest("mãc")


def test_priority_ordering(categories):
    qe = engine_for(categories, [kw("Cerveja", "BEBIDAS"), kw("Cereais", "ALIMENTOS")])
    assert qe.suggest("cer") == ["cereais", "cerveja"]


def test_equal_priority_ties_break_alphabetically():
    cats = [Category("A", 1)]
    qe = engine_for(cats, [kw("banana", "A"), kw("bala", "A"), kw("bacon", "A")])
    assert qe.suggest("ba") == ["bacon", "bala", "banana"]


def test_merged_priority_drives_ranking():
    cats = [Category("high", 1), Category("mid", 10), Category("low", 50)]
    qe = engine_for(cats, [kw("Delivery", "low"), kw("Delivery", "high"), kw("Dengue", "mid")])
    assert qe.suggest("de") == ["delivery", "dengue"]


def test_default_priority_ranks_last():
    cats = [Category("ALIMENTOS", 1)]
    qe = engine_for(cats, [kw("Zebra", "orphan-id"), kw("Zeca", "ALIMENTOS")])
    assert qe.suggest("ze") == ["zeca", "zebra"]
    assert qe.categories_for("zebra") == {"orphan-id"}


def test_fuzzy_tolerance_for_long_query(categories):
    qe = engine_for(categories, [kw("Sabonete", "SAUDE")])
    assert "sabonete" in qe.suggest("sabinete")


def test_short_query_allows_single_edit():
    cats = [Category("A", 1)]
    qe = engine_for(cats, [kw("bolo", "A")])
    assert qe.suggest("bolx") == ["bolo"]
    assert qe.suggest("bala") == []


def test_fuzzy_results_sorted_by_priority():
    cats = [Category("A", 1), Category("B", 2)]
    qe = engine_for(cats, [kw("gato", "B"), kw("rato", "A"), kw("mato", "B")])
    assert qe.suggest("pato") == ["rato", "gato", "mato"]


def test_prefix_hits_precede_fuzzy_hits():
    cats = [Category("TOP", 1), Category("LOW", 5)]
    keywords = [kw(w, "LOW") for w in ("bola", "bolo", "bolsa", "boleto")] + [kw("sol", "TOP")]
    qe = engine_for(cats, keywords)
    assert qe.suggest("bol") == ["bola", "boleto", "bolo", "bolsa", "sol"]


def test_five_prefix_hits_skip_fuzzy_phase():
    cats = [Category("TOP", 1), Category("LOW", 5)]
    keywords = [kw(w, "LOW") for w in ("bola", "bolo", "bolsa", "boleto", "boliche")] + [kw("sol", "TOP")]
    qe = engine_for(cats, keywords)
    out = qe.suggest("bol")
    assert "sol" not in out
    assert len(out) == 5


def test_query_shorter_than_three_skips_fuzzy_phase():
    qe = engine_for([Category("A", 1)], [kw("xo", "A")])
    assert qe.suggest("so") == []


def test_never_more_than_ten_results():
    cats = [Category("A", 1)]
    qe = engine_for(cats, [kw(f"item{i:02d}", "A") for i in range(30)])
    out = qe.suggest("item")
    assert out == [f"item{i:02d}" for i in range(10)]
    # fuzzy fill is capped too
    qe = engine_for(cats, [kw(f"cas{c}", "A") for c in "abcdefghijklmnop"] + [kw("casa", "A")])
    assert len(qe.suggest("casx")) <= 10


def test_configurable_limits():
    cats = [Category("A", 1)]
    qe = engine_for(cats, [kw(f"item{i}", "A") for i in range(5)], max_results=3)
    assert len(qe.suggest("item")) == 3


def test_categories_for_multi_category_merge(categories):
    qe = engine_for(categories, [kw("Detergente", "LIMPEZA"), kw("Detergente", "OUTROS")])
    assert qe.categories_for("detergente") == {"LIMPEZA", "OUTROS"}
    assert qe.categories_for("  DETERGENTE ") == {"LIMPEZA", "OUTROS"}


def test_categories_for_uses_storage_key_not_folded_form(categories):
    qe = engine_for(categories, [kw("Maçã", "ALIMENTOS")])
    assert qe.categories_for("maçã") == {"ALIMENTOS"}
    assert qe.categories_for("MAÇÃ") == {"ALIMENTOS"}
    assert qe.categories_for("maca") == frozenset()


def test_product_terms_feed_categories(categories):
    qe = engine_for(categories, [kw("Apple", "ALIMENTOS")], [product("p1", "BEBIDAS", "Gala", "Apple")])
    assert qe.categories_for("gala") == {"BEBIDAS"}
    assert qe.categories_for("apple") == {"ALIMENTOS", "BEBIDAS"}
