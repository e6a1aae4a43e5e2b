"""Output utilities for simulation results."""

from __future__ import annotations

import csv
import json
from pathlib import Path

import numpy as np


def write_trajectory_csv(
    path: Path,
    time_s: np.ndarray,
    acceleration: np.ndarray,
    velocity: np.ndarray,
    position: np.ndarray,
) -> None:
    """Write one row per whole second: time, acceleration, velocity, position."""
    with path.open('w', newline='', encoding='utf-8') as f:
        w = csv.writer(f)
        w.writerow(['time_s', 'acceleration', 'velocity', 'position'])
        for i in range(time_s.size):
            w.writerow([
                f'{time_s[i]:.0f}',
                f'{acceleration[i]:.15g}',
                f'{velocity[i]:.15g}',
                f'{position[i]:.15g}',
            ])


def write_summary_json(path: Path, summary: dict) -> None:
    path.write_text(json.dumps(summary, indent=2) + '\n', encoding='utf-8')
