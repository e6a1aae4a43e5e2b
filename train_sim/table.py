from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from train_sim.errors import AllocationFailure, IndexOutOfRange


@dataclass
class SampleTable:
    """
    Acceleration or velocity samples, one per whole second since the start.

    The stored array is a private read-only copy, so a table can be shared by
    any number of worker threads without locking.
    """

    values: np.ndarray  # shape (N,), index = elapsed seconds

    def __post_init__(self) -> None:
        arr = np.array(self.values, dtype=float)
        if arr.ndim != 1:
            raise ValueError(f'Sample table must be one-dimensional, got shape {arr.shape}.')
        arr.setflags(write=False)
        self.values = arr

    @classmethod
    def from_values(cls, values: Iterable[float]) -> SampleTable:
        return cls(np.fromiter((float(v) for v in values), dtype=float))

    def __len__(self) -> int:
        return int(self.values.size)

    def __getitem__(self, index: int) -> float:
        # No negative wrap-around: -1 is out of range, not the last sample.
        if index < 0 or index >= self.values.size:
            raise IndexOutOfRange(index, int(self.values.size))
        return float(self.values[index])

    def time_s(self) -> np.ndarray:
        return np.arange(self.values.size, dtype=float)


def allocate_velocity_table(length: int) -> np.ndarray:
    """Fresh zeroed buffer for one run's velocities; entry 0 stays 0.0 (start at rest)."""
    try:
        return np.zeros(length, dtype=float)
    except MemoryError as e:
        raise AllocationFailure(length) from e
