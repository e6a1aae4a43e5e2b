from __future__ import annotations

from train_sim.interpolation import Evaluator


def even_subdivisions(subdivisions: int) -> int:
    """Round an odd subdivision count up to the next even one."""
    return subdivisions + (subdivisions % 2)


def simpsons(lower: float, upper: float, subdivisions: int, f: Evaluator) -> float:
    """
    Composite Simpson's rule with 1-4-2-4-...-2-4-1 weights.

    The weights only sum to the interval width for an even number of panels,
    so an odd count is rounded up first (1 -> 2, 3 -> 4, ...). With that the
    rule is exact for polynomials up to cubic order.
    """
    n = even_subdivisions(subdivisions)
    step = (upper - lower) / n
    total = f(lower) + f(upper)
    for k in range(1, n):
        weight = 4.0 if k % 2 == 1 else 2.0
        total += weight * f(lower + k * step)
    return step * total / 3.0
