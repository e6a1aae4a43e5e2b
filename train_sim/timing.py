"""Benchmark timing: per-iteration stats and a progress-report throttle."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field

DEFAULT_LOG_INTERVAL_S = 10.0


def _fmt_s(seconds: float) -> str:
    return f'{seconds:.9f}'


@dataclass
class Timing:
    """
    Min/max/total over the iteration durations passed to update().

    Renders min/max/avg/tot when more than one duration was recorded,
    otherwise just the total.
    """

    min_s: float = float('inf')
    max_s: float = 0.0
    total_s: float = 0.0
    count: int = 0

    def update(self, duration_s: float) -> None:
        self.min_s = min(self.min_s, duration_s)
        self.max_s = max(self.max_s, duration_s)
        self.total_s += duration_s
        self.count += 1

    @property
    def avg_s(self) -> float:
        return self.total_s / self.count if self.count else 0.0

    def as_dict(self) -> dict:
        return {
            'count': self.count,
            'min_s': self.min_s if self.count else None,
            'max_s': self.max_s if self.count else None,
            'avg_s': self.avg_s if self.count else None,
            'total_s': self.total_s,
        }

    def __str__(self) -> str:
        if self.count > 1:
            return '\n'.join([
                f'min: {_fmt_s(self.min_s)}',
                f'max: {_fmt_s(self.max_s)}',
                f'avg: {_fmt_s(self.avg_s)}',
                f'tot: {_fmt_s(self.total_s)}',
            ])
        return f'total: {_fmt_s(self.total_s)}'


@dataclass
class LogTimer:
    """Reports True from update() once more than `interval_s` has passed since the last True."""

    interval_s: float = DEFAULT_LOG_INTERVAL_S
    clock: Callable[[], float] = time.monotonic
    last: float = field(default=0.0)

    def __post_init__(self) -> None:
        self.last = self.clock()

    def update(self) -> bool:
        now = self.clock()
        if now - self.last > self.interval_s:
            self.last = now
            return True
        return False
