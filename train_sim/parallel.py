"""Fork-join over statically partitioned index ranges."""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

T = TypeVar("T")


def partition(start: int, stop: int, workers: int) -> list[range]:
    """
    Split [start, stop) into at most `workers` contiguous chunks.

    Chunk sizes differ by at most one, the larger chunks come first, and
    empty chunks are dropped (fewer items than workers).
    """
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    count = max(stop - start, 0)
    base, extra = divmod(count, workers)

    chunks: list[range] = []
    lo = start
    for w in range(workers):
        size = base + (1 if w < extra else 0)
        if size == 0:
            break
        chunks.append(range(lo, lo + size))
        lo += size
    return chunks


def fork_join(task: Callable[[range], T], chunks: list[range]) -> list[T]:
    """
    Run `task` once per chunk on its own worker thread and wait for all of them.

    Workers are created for this call only and joined before returning; a
    single chunk runs inline on the caller. Results come back in chunk order.
    If any task raises, the exception is re-raised here after every worker has
    finished.
    """
    if not chunks:
        return []
    if len(chunks) == 1:
        return [task(chunks[0])]

    with ThreadPoolExecutor(max_workers=len(chunks), thread_name_prefix="train-sim") as pool:
        futures = [pool.submit(task, chunk) for chunk in chunks]
    return [f.result() for f in futures]
