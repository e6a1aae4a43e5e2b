"""Built-in acceleration profile used when no input file is given."""

from __future__ import annotations

from train_sim.table import SampleTable

# m/s^2 at each whole second: pull away, cruise, brake to a stop.
DEFAULT_ACCELERATION_MPS2: tuple[float, ...] = (
    0.0, 0.2, 0.4, 0.6, 0.8, 1.0, 1.0, 1.0, 1.0, 1.0,
    1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 0.9, 0.8, 0.7, 0.6,
    0.5, 0.4, 0.3, 0.2, 0.1, 0.0, 0.0, 0.0, 0.0, 0.0,
    0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -0.2, -0.4, -0.6, -0.8,
    -1.0, -1.0, -1.0, -1.0, -1.0, -1.0, -1.0, -1.0, -1.0, -1.0,
    -1.0, -0.8, -0.6, -0.4, -0.2, 0.0,
)


def default_acceleration_table() -> SampleTable:
    return SampleTable.from_values(DEFAULT_ACCELERATION_MPS2)
