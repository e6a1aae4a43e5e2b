from __future__ import annotations

import os
from collections.abc import Callable
from typing import TypeVar

ENV_PREFIX = 'TRAIN_SIM_'

T = TypeVar('T')

_TRUE = {'1', 'true', 'yes', 'y', 'on'}
_FALSE = {'0', 'false', 'no', 'n', 'off'}


def env_str(name: str) -> str | None:
    """Stripped value of TRAIN_SIM_<name>; unset or blank gives None."""
    v = os.getenv(ENV_PREFIX + name, '').strip()
    return v or None


def _parse_bool(v: str) -> bool:
    s = v.lower()
    if s in _TRUE or s in _FALSE:
        return s in _TRUE
    raise ValueError(f'{v!r} is not a boolean. Use true/false, 1/0, yes/no.')


def env_value(name: str, convert: Callable[[str], T]) -> T | None:
    v = env_str(name)
    if v is None:
        return None
    try:
        return convert(v)
    except ValueError as e:
        raise ValueError(f'Invalid env var {ENV_PREFIX}{name}={v!r}: {e}') from e


def env_overrides() -> dict:
    """Simulation settings from TRAIN_SIM_* variables; unset ones are omitted."""
    found = {
        'threads': env_value('THREADS', int),
        'method': env_str('METHOD'),
        'subdivisions': env_value('SUBDIVISIONS', int),
        'iterations': env_value('ITERATIONS', int),
        'log_interval_s': env_value('LOG_INTERVAL_S', float),
        'plot': env_value('PLOT', _parse_bool),
    }
    return {k: v for k, v in found.items() if v is not None}
