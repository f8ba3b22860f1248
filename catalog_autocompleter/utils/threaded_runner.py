# threaded_runner.py - fan zero-argument callables out over a thread pool.
# Used to drive concurrent suggest() readers against index rebuilds.

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, List, Sequence


def run_parallel(tasks: Sequence[Callable], max_workers: int = 4, ordered: bool = False) -> List:
    """
    Start every task, wait for all of them and return their results.
    ordered=True lines results up with `tasks` (result i belongs to task i);
    otherwise they come back as the tasks finish.
    The first task exception propagates once the pool has shut down.
    """
    workers = max(1, min(max_workers, len(tasks)))
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="ac-worker") as pool:
        futures = [pool.submit(task) for task in tasks]
        done = futures if ordered else as_completed(futures)
        return [f.result() for f in done]
