"""Left, midpoint and right Riemann sums."""

from __future__ import annotations

from train_sim.interpolation import Evaluator


def left_riemann(lower: float, upper: float, subdivisions: int, f: Evaluator) -> float:
    step = (upper - lower) / subdivisions
    total = 0.0
    for k in range(subdivisions):
        total += f(lower + k * step)
    return step * total


def mid_riemann(lower: float, upper: float, subdivisions: int, f: Evaluator) -> float:
    step = (upper - lower) / subdivisions
    half_step = step / 2.0
    total = 0.0
    for k in range(subdivisions):
        total += f(lower + k * step + half_step)
    return step * total


def right_riemann(lower: float, upper: float, subdivisions: int, f: Evaluator) -> float:
    step = (upper - lower) / subdivisions
    total = 0.0
    for k in range(subdivisions):
        total += f(lower + (k + 1) * step)
    return step * total
