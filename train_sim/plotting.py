from __future__ import annotations

from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt


def plot_trajectory(
    time_s: np.ndarray,
    acceleration: np.ndarray,
    velocity: np.ndarray,
    position: np.ndarray,
    out_path: Path,
    *,
    title: str | None = None,
) -> None:
    """Plot position and velocity over time with the input acceleration below."""
    fig, (ax1, ax2, ax3) = plt.subplots(
        3, 1, figsize=(12, 9), sharex=True, gridspec_kw={"height_ratios": [2, 2, 1]}
    )

    ax1.plot(time_s, position, color="tab:blue", linewidth=1.5)
    ax1.set_ylabel("Position")
    ax1.set_title(title or "Trajectory vs Time")
    ax1.grid(True, alpha=0.3)

    ax2.plot(time_s, velocity, color="tab:green", linewidth=1.5)
    ax2.axhline(y=0, color="gray", linewidth=0.8, linestyle="--")
    ax2.set_ylabel("Velocity")
    ax2.grid(True, alpha=0.3)

    ax3.plot(time_s, acceleration, color="tab:red", linewidth=1.2)
    ax3.axhline(y=0, color="gray", linewidth=0.8, linestyle="--")
    ax3.set_xlabel("Time (s)")
    ax3.set_ylabel("Acceleration")
    ax3.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig(out_path, dpi=160)
    plt.close(fig)
