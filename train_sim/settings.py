"""Config loading and validation.

Policy:
- Defaults live in the config.json shipped inside the package, not in code.
- If required config keys are missing or malformed, fail with ConfigError.
- TRAIN_SIM_* environment variables and command-line options override the
  config file (command line wins).
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from train_sim.errors import ConfigError
from train_sim.quadrature import parse_method
from train_sim.simulation import SimulationConfig


DEFAULT_CONFIG_JSON = Path(__file__).parent / 'config.json'


@dataclass(frozen=True)
class RunSettings:
    simulation: SimulationConfig
    log_interval_s: float
    output_dir: Path | None
    plot: bool


def resolve_path(p: str) -> Path:
    """Relative paths are taken from the current working directory."""
    return Path(p).expanduser().resolve()


def _require_path(cfg: dict, keys: list[str]) -> Any:
    cur: Any = cfg
    for depth, k in enumerate(keys, start=1):
        if not isinstance(cur, dict) or k not in cur:
            raise ConfigError(f'Missing required config key: {".".join(keys[:depth])}')
        cur = cur[k]
    return cur


def _req(cfg: dict, keys: list[str], kind: str, check: Callable[[Any], Any]) -> Any:
    """Look up a dotted key and coerce it with `check`, which raises on bad values."""
    v = _require_path(cfg, keys)
    try:
        return check(v)
    except (TypeError, ValueError) as e:
        raise ConfigError(f'Config key {".".join(keys)} must be {kind}.') from e


def _as_int(v: Any) -> int:
    if isinstance(v, bool) or (isinstance(v, float) and not v.is_integer()):
        raise ValueError(v)
    return int(v)


def _as_float(v: Any) -> float:
    if isinstance(v, bool):
        raise ValueError(v)
    return float(v)


def _as_str(v: Any) -> str:
    if not isinstance(v, str) or not v.strip():
        raise ValueError(v)
    return v


def _as_bool(v: Any) -> bool:
    if not isinstance(v, bool):
        raise ValueError(v)
    return v


def req_int(cfg: dict, keys: list[str]) -> int:
    return _req(cfg, keys, 'an int-like value', _as_int)


def req_float(cfg: dict, keys: list[str]) -> float:
    return _req(cfg, keys, 'a float-like value', _as_float)


def req_str(cfg: dict, keys: list[str], *, nullable: bool = False) -> str | None:
    if nullable and _require_path(cfg, keys) is None:
        return None
    return _req(cfg, keys, 'a non-empty string', _as_str)


def req_bool(cfg: dict, keys: list[str]) -> bool:
    return _req(cfg, keys, 'true or false', _as_bool)


def read_config(path: Path | None = None) -> dict:
    cfg_path = Path(path) if path is not None else DEFAULT_CONFIG_JSON
    if not cfg_path.exists():
        raise ConfigError(f'Config file not found: {cfg_path}')
    try:
        cfg = json.loads(cfg_path.read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        raise ConfigError(f'Config file {cfg_path} is not valid JSON: {e}') from e
    validate_config(cfg)
    return cfg


def validate_config(cfg: dict) -> None:
    # Existence/type checks (no defaults).
    req_int(cfg, ['simulation', 'threads'])
    req_str(cfg, ['simulation', 'method'])
    req_int(cfg, ['simulation', 'subdivisions'])
    req_int(cfg, ['simulation', 'iterations'])

    req_float(cfg, ['progress', 'log_interval_s'])

    req_str(cfg, ['output', 'dir'], nullable=True)
    req_bool(cfg, ['output', 'plot'])


def _at_least_one(name: str, value: int) -> int:
    if value < 1:
        raise ConfigError(f'{name} must be at least 1, got {value}.')
    return value


def build_simulation_config(cfg: dict, overrides: dict | None = None) -> SimulationConfig:
    """
    SimulationConfig from config values, with `overrides` (threads, method,
    subdivisions, iterations) taking precedence when present and not None.
    """
    o = {k: v for k, v in (overrides or {}).items() if v is not None}

    def _int(name: str) -> int:
        return int(o[name]) if name in o else req_int(cfg, ['simulation', name])

    method = o['method'] if 'method' in o else req_str(cfg, ['simulation', 'method'])

    return SimulationConfig(
        thread_count=_at_least_one('threads', _int('threads')),
        method=parse_method(method),
        subdivisions=_at_least_one('subdivisions', _int('subdivisions')),
        iterations=_at_least_one('iterations', _int('iterations')),
    )


def build_run_settings(cfg: dict, overrides: dict | None = None) -> RunSettings:
    o = {k: v for k, v in (overrides or {}).items() if v is not None}

    log_interval_s = (
        float(o['log_interval_s']) if 'log_interval_s' in o else req_float(cfg, ['progress', 'log_interval_s'])
    )
    if log_interval_s < 0.0:
        raise ConfigError(f'log_interval_s must not be negative, got {log_interval_s}.')

    out = o['output_dir'] if 'output_dir' in o else req_str(cfg, ['output', 'dir'], nullable=True)
    plot = bool(o['plot']) if 'plot' in o else req_bool(cfg, ['output', 'plot'])

    return RunSettings(
        simulation=build_simulation_config(cfg, o),
        log_interval_s=log_interval_s,
        output_dir=resolve_path(str(out)) if out is not None else None,
        plot=plot,
    )
