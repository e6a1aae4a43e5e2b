from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from train_sim.errors import ConfigError
from train_sim.interpolation import Evaluator
from .riemann import left_riemann, mid_riemann, right_riemann
from .simpson import even_subdivisions, simpsons
from .trapezoidal import trapezoidal


class QuadratureMethod(str, Enum):
    LEFT_RIEMANN = "left-riemann"
    MID_RIEMANN = "mid-riemann"
    RIGHT_RIEMANN = "right-riemann"
    TRAPEZOIDAL = "trapezoidal"
    SIMPSONS = "simpsons"


@dataclass(frozen=True)
class QuadratureRule:
    method: QuadratureMethod
    integrate: Callable[[float, float, int, Evaluator], float]
    # Subdivisions the rule actually evaluates for a requested count.
    effective_subdivisions: Callable[[int], int] = int

    @property
    def name(self) -> str:
        return self.method.value


QUADRATURE_RULES: dict[QuadratureMethod, QuadratureRule] = {
    QuadratureMethod.LEFT_RIEMANN: QuadratureRule(QuadratureMethod.LEFT_RIEMANN, left_riemann),
    QuadratureMethod.MID_RIEMANN: QuadratureRule(QuadratureMethod.MID_RIEMANN, mid_riemann),
    QuadratureMethod.RIGHT_RIEMANN: QuadratureRule(QuadratureMethod.RIGHT_RIEMANN, right_riemann),
    QuadratureMethod.TRAPEZOIDAL: QuadratureRule(QuadratureMethod.TRAPEZOIDAL, trapezoidal),
    QuadratureMethod.SIMPSONS: QuadratureRule(
        QuadratureMethod.SIMPSONS, simpsons, effective_subdivisions=even_subdivisions
    ),
}

_ALIASES = {
    "simpson": QuadratureMethod.SIMPSONS,
    "trapezoid": QuadratureMethod.TRAPEZOIDAL,
}


def parse_method(name: str | QuadratureMethod) -> QuadratureMethod:
    if isinstance(name, QuadratureMethod):
        return name
    key = str(name).strip().lower().replace("_", "-")
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return QuadratureMethod(key)
    except ValueError:
        valid = ", ".join(m.value for m in QuadratureMethod)
        raise ConfigError(f"Unknown quadrature method '{name}'. Available: {valid}") from None


def get_rule(name: str | QuadratureMethod) -> QuadratureRule:
    return QUADRATURE_RULES[parse_method(name)]


__all__ = [
    "QUADRATURE_RULES",
    "QuadratureMethod",
    "QuadratureRule",
    "get_rule",
    "parse_method",
]
