import threading

import pytest

from train_sim.parallel import fork_join, partition


def test_partition_is_contiguous_and_balanced():
    chunks = partition(1, 11, 3)
    assert chunks == [range(1, 5), range(5, 8), range(8, 11)]
    assert [i for c in chunks for i in c] == list(range(1, 11))


def test_partition_drops_empty_chunks():
    assert partition(1, 3, 4) == [range(1, 2), range(2, 3)]
    assert partition(1, 1, 4) == []
    assert partition(0, 6, 1) == [range(0, 6)]


def test_partition_rejects_zero_workers():
    with pytest.raises(ValueError):
        partition(0, 10, 0)


def test_fork_join_returns_results_in_chunk_order():
    chunks = partition(0, 100, 4)
    assert fork_join(sum, chunks) == [sum(c) for c in chunks]
    assert sum(fork_join(sum, chunks)) == sum(range(100))


def test_fork_join_runs_chunks_concurrently():
    chunks = partition(0, 8, 4)
    # Every worker has to reach the barrier before any of them can finish.
    barrier = threading.Barrier(len(chunks), timeout=10)

    def _task(chunk):
        barrier.wait()
        return threading.get_ident()

    idents = fork_join(_task, chunks)
    assert len(set(idents)) == len(chunks)


def test_fork_join_reraises_worker_errors():
    def _task(chunk):
        if 5 in chunk:
            raise KeyError("boom")
        return len(chunk)

    with pytest.raises(KeyError):
        fork_join(_task, partition(0, 10, 3))


def test_fork_join_without_chunks():
    assert fork_join(len, []) == []
