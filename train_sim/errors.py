"""Error kinds raised by the simulation core and its config layer."""

from __future__ import annotations


class SimulationError(Exception):
    pass


class ConfigError(SimulationError, ValueError):
    """Invalid thread count, subdivision count, iteration count or method."""


class IndexOutOfRange(SimulationError, IndexError):
    """A sample table was read outside its bounds."""

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f'sample index out of bounds. index: {index} len: {length}')


class AllocationFailure(SimulationError, MemoryError):
    """The velocity table for a run could not be allocated."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f'failed allocating velocity table of {length} samples')
