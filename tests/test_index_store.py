# tests/test_index_store.py
# publish semantics: readers always see one complete index, never a mix
import threading

from catalog_autocompleter.catalog.models import Category
from catalog_autocompleter.core.index_builder import Index, build_index
from catalog_autocompleter.core.index_store import IndexStore
from catalog_autocompleter.core.query_engine import QueryEngine
from catalog_autocompleter.utils.threaded_runner import run_parallel

from conftest import kw

CATS = [Category("A", 1)]
DATASET_A = [kw(f"aba{i}", "A") for i in range(8)]
DATASET_B = [kw(f"abb{i}", "A") for i in range(8)]


def test_new_store_starts_empty():
    store = IndexStore()
    assert len(store.current()) == 0
    assert QueryEngine(store).suggest("anything") == []


def test_replace_swaps_whole_index():
    store = IndexStore(build_index(CATS, DATASET_A, []))
    old = store.current()
    store.replace(build_index(CATS, DATASET_B, []))

    assert set(store.current()) == {f"abb{i}" for i in range(8)}
    # a snapshot taken before the swap is untouched
    assert set(old) == {f"aba{i}" for i in range(8)}


def test_no_stale_terms_after_rebuild():
    store = IndexStore(build_index(CATS, [kw("Arroz", "A")], []))
    qe = QueryEngine(store)
    assert qe.suggest("arr") == ["arroz"]
    store.replace(build_index(CATS, [kw("Feijão", "A")], []))
    assert qe.suggest("arr") == []
    assert qe.categories_for("arroz") == frozenset()
    assert qe.suggest("fei") == ["feijão"]


def test_store_accepts_prebuilt_empty_index():
    store = IndexStore(Index.empty())
    assert len(store.current()) == 0


def test_readers_never_observe_a_mixed_index():
    store = IndexStore(build_index(CATS, DATASET_A, []))
    qe = QueryEngine(store)
    index_a = build_index(CATS, DATASET_A, [])
    index_b = build_index(CATS, DATASET_B, [])
    done = threading.Event()

    def writer():
        for i in range(300):
            store.replace(index_b if i % 2 == 0 else index_a)
            # rebuild from scratch now and then so the builder runs concurrently too
            if i % 50 == 0:
                store.replace(build_index(CATS, DATASET_B if i % 100 else DATASET_A, []))
        done.set()
        return "writer"

    def reader():
        bad = []
        reads = 0
        while not done.is_set() or reads < 50:
            out = qe.suggest("ab")
            reads += 1
            prefixes = {k[:3] for k in out}
            if len(out) != 8 or len(prefixes) != 1:
                bad.append(out)
        return bad

    writer_result, *reader_results = run_parallel([writer] + [reader] * 4, max_workers=5, ordered=True)
    assert writer_result == "writer"
    assert reader_results == [[], [], [], []]
