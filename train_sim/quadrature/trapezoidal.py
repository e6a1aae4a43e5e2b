from __future__ import annotations

from train_sim.interpolation import Evaluator


def trapezoidal(lower: float, upper: float, subdivisions: int, f: Evaluator) -> float:
    """Composite trapezoidal rule: endpoints weighted 1/2, interior points 1."""
    step = (upper - lower) / subdivisions
    total = (f(lower) + f(upper)) / 2.0
    for k in range(1, subdivisions):
        total += f(lower + k * step)
    return step * total
