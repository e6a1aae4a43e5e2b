"""Piecewise-linear evaluation of a sample table between whole seconds."""

from __future__ import annotations

import math
from collections.abc import Callable

from train_sim.table import SampleTable

Evaluator = Callable[[float], float]


def evaluate(table: SampleTable, x: float) -> float:
    """
    Value of the piecewise-linear function through the table's samples at x.

    Whole-second coordinates return the stored sample exactly. Otherwise:
      y = y0 + (x - x0) * (y1 - y0)
    since neighbouring samples are always exactly one second apart.

    Raises IndexOutOfRange when x0 (or x1 for fractional x) is outside the table.
    """
    x0 = math.floor(x)
    if x0 == x:
        return table[x0]

    y0 = table[x0]
    y1 = table[x0 + 1]
    return y0 + (x - x0) * (y1 - y0)


def make_evaluator(table: SampleTable) -> Evaluator:
    def _evaluate(x: float) -> float:
        return evaluate(table, x)

    return _evaluate
