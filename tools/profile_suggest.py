# tools/profile_suggest.py
"""
Small profiling harness for AutoCompleter.suggest.
Usage:
  python tools/profile_suggest.py --terms 20000 --iters 2000 --readers 4

Builds a synthetic catalog, then measures suggest() latency single-threaded
and with concurrent readers while rebuilds keep swapping the index.
Prints median/p90/p99/max latency in ms.
"""

import argparse
import random
import string
import time

import numpy as np

from catalog_autocompleter.catalog.models import Category, Keyword, Product
from catalog_autocompleter.core.autocompleter import AutoCompleter
from catalog_autocompleter.utils.threaded_runner import run_parallel

QUERIES = ["arr", "cer", "maca", "sabinete", "detergente", "ca", "queijo", "agua min"]


def synthetic_catalog(n_terms: int, seed: int = 7):
    rnd = random.Random(seed)
    categories = [Category(id=f"C{i}", priority=i) for i in range(20)]
    keywords = []
    for _ in range(n_terms):
        word = "".join(rnd.choice(string.ascii_lowercase) for _ in range(rnd.randint(3, 12)))
        keywords.append(Keyword(term=word, category_id=rnd.choice(categories).id))
    products = [
        Product(id=f"p{i}", name=f"produto {i}", category_id=rnd.choice(categories).id,
                is_official=True, search_terms=(f"produto{i}",))
        for i in range(n_terms // 10)
    ]
    return categories, keywords, products


def benchmark(ac: AutoCompleter, iterations: int):
    times = []
    for _ in range(iterations):
        q = random.choice(QUERIES)
        t0 = time.perf_counter()
        ac.suggest(q)
        times.append((time.perf_counter() - t0) * 1000.0)  # ms
    return times


def summarize(times):
    arr = np.asarray(times, dtype=float)
    return {
        "count": int(arr.size),
        "median_ms": round(float(np.median(arr)), 4),
        "p90_ms": round(float(np.percentile(arr, 90)), 4),
        "p99_ms": round(float(np.percentile(arr, 99)), 4),
        "max_ms": round(float(arr.max()), 4),
    }


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--terms", type=int, default=20000, help="synthetic keywords")
    parser.add_argument("--iters", type=int, default=1000, help="measured iterations per reader")
    parser.add_argument("--readers", type=int, default=4, help="concurrent readers")
    args = parser.parse_args()

    categories, keywords, products = synthetic_catalog(args.terms)
    ac = AutoCompleter()
    t0 = time.perf_counter()
    ac.rebuild(categories, keywords, products)
    print(f"rebuild: {len(ac.store.current())} terms in {time.perf_counter() - t0:.3f}s")

    print("single reader (ms):", summarize(benchmark(ac, args.iters)))

    def rebuild_loop():
        for _ in range(3):
            ac.rebuild(categories, keywords, products)
        return 3

    tasks = [rebuild_loop] + [lambda: benchmark(ac, args.iters) for _ in range(args.readers)]
    rebuilds, *readers = run_parallel(tasks, max_workers=args.readers + 1, ordered=True)
    merged = [t for r in readers for t in r]
    print(f"{args.readers} readers + {rebuilds} rebuilds (ms):", summarize(merged))
    print("sample:", ac.suggest("cer"))


if __name__ == "__main__":
    main()
