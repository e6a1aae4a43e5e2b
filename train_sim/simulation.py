"""Acceleration -> velocity -> position integration drivers.

Both drivers integrate one whole second at a time with the configured
quadrature rule, first over the acceleration table to build the velocity
table, then over the velocity table to get the travelled distance.

run_sequential keeps a running sum in a single loop. run_parallel splits the
same work into three phases:
  1. per-second velocity deltas, computed by worker threads into disjoint
     slots of the velocity buffer
  2. a single-threaded prefix sum turning the deltas into velocities
  3. per-second position deltas, summed locally per worker and combined once
     after the join
Phase 3 adds the deltas in a different order than the sequential loop, so the
final position can differ from it by rounding error.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from train_sim.interpolation import make_evaluator
from train_sim.parallel import fork_join, partition
from train_sim.quadrature import QuadratureMethod, QuadratureRule, get_rule, parse_method
from train_sim.table import SampleTable, allocate_velocity_table


@dataclass(frozen=True)
class SimulationConfig:
    thread_count: int = 1
    method: QuadratureMethod = QuadratureMethod.LEFT_RIEMANN
    subdivisions: int = 100
    iterations: int = 100  # benchmark repetitions only; results do not depend on it

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", parse_method(self.method))

    def rule(self) -> QuadratureRule:
        return get_rule(self.method)


@dataclass
class SimulationResult:
    final_velocity: float
    final_position: float
    velocity: SampleTable  # cumulative velocity at each whole second


def _velocity_buffer(n: int, velocity: np.ndarray | None) -> np.ndarray:
    if velocity is None:
        return allocate_velocity_table(n)
    if velocity.shape != (n,):
        raise ValueError(f"velocity buffer must have shape ({n},), got {velocity.shape}")
    velocity[0] = 0.0
    return velocity


def integrate_profile(table: SampleTable, rule: QuadratureRule, subdivisions: int) -> np.ndarray:
    """Running integral of `table` at each whole second, starting from 0.0."""
    f = make_evaluator(table)
    out = allocate_velocity_table(len(table))
    running = 0.0
    for sec in range(1, len(table)):
        running += rule.integrate(float(sec - 1), float(sec), subdivisions, f)
        out[sec] = running
    return out


def run_sequential(
    config: SimulationConfig, acceleration: SampleTable, velocity: np.ndarray | None = None
) -> SimulationResult:
    rule = config.rule()
    n = len(acceleration)

    velocity = _velocity_buffer(n, velocity)
    f_accel = make_evaluator(acceleration)
    running_velocity = 0.0
    for sec in range(1, n):
        running_velocity += rule.integrate(float(sec - 1), float(sec), config.subdivisions, f_accel)
        velocity[sec] = running_velocity

    velocity_table = SampleTable(velocity)
    f_vel = make_evaluator(velocity_table)
    running_position = 0.0
    for sec in range(1, n):
        running_position += rule.integrate(float(sec - 1), float(sec), config.subdivisions, f_vel)

    return SimulationResult(
        final_velocity=running_velocity,
        final_position=running_position,
        velocity=velocity_table,
    )


def run_parallel(
    config: SimulationConfig, acceleration: SampleTable, velocity: np.ndarray | None = None
) -> SimulationResult:
    rule = config.rule()
    n = len(acceleration)
    subdivisions = config.subdivisions
    chunks = partition(1, n, config.thread_count)

    velocity = _velocity_buffer(n, velocity)
    f_accel = make_evaluator(acceleration)

    # Phase 1: each worker owns the slots of its own chunk.
    def _velocity_deltas(chunk: range) -> None:
        for sec in chunk:
            velocity[sec] = rule.integrate(float(sec - 1), float(sec), subdivisions, f_accel)

    fork_join(_velocity_deltas, chunks)

    # Phase 2: prefix sum, strictly left to right.
    running_velocity = 0.0
    for sec in range(1, n):
        running_velocity += float(velocity[sec])
        velocity[sec] = running_velocity

    velocity_table = SampleTable(velocity)
    f_vel = make_evaluator(velocity_table)

    # Phase 3: local partial sums, merged once after the join.
    def _position_partial(chunk: range) -> float:
        partial = 0.0
        for sec in chunk:
            partial += rule.integrate(float(sec - 1), float(sec), subdivisions, f_vel)
        return partial

    final_position = 0.0
    for partial in fork_join(_position_partial, chunks):
        final_position += partial

    return SimulationResult(
        final_velocity=running_velocity,
        final_position=final_position,
        velocity=velocity_table,
    )


def run(
    config: SimulationConfig, acceleration: SampleTable, velocity: np.ndarray | None = None
) -> SimulationResult:
    """`velocity`, if given, is a buffer of len(acceleration) floats to fill instead of allocating one."""
    if config.thread_count == 1:
        return run_sequential(config, acceleration, velocity)
    return run_parallel(config, acceleration, velocity)
