# threaded_runner.py - wrapper to run functions in threads and collect their results.

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List


def run_parallel(tasks: Iterable[Callable], max_workers: int = 4) -> List:
    """
    Run callables (no-arg functions) in a small thread pool.
    Results come back in submission order. The first exception raised by a
    task is re-raised.
    """
    with ThreadPoolExecutor(max_workers=max(1, max_workers)) as ex:
        futs = [ex.submit(t) for t in tasks]
        return [f.result() for f in futs]
