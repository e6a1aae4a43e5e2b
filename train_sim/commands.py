"""Benchmark command: repeated simulation runs with timing and progress output."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path

from train_sim.errors import AllocationFailure, IndexOutOfRange
from train_sim.output import write_summary_json, write_trajectory_csv
from train_sim.plotting import plot_trajectory
from train_sim.settings import RunSettings
from train_sim.simulation import SimulationConfig, SimulationResult, integrate_profile, run
from train_sim.table import SampleTable, allocate_velocity_table
from train_sim.timing import DEFAULT_LOG_INTERVAL_S, LogTimer, Timing


@dataclass
class BenchmarkReport:
    result: SimulationResult | None  # last completed iteration
    timing: Timing
    completed: int = 0
    failures: list[str] = field(default_factory=list)
    aborted: bool = False


def run_benchmark(
    config: SimulationConfig,
    acceleration: SampleTable,
    *,
    log_timer: LogTimer | None = None,
    echo=print,
) -> BenchmarkReport:
    """
    Run the simulation `config.iterations` times, one after another.

    Each iteration gets a fresh velocity buffer, allocated before its timer
    starts, so the recorded durations cover only the integration passes.

    An out-of-range table read fails only that iteration; an allocation failure
    stops the benchmark. Final velocity/position are echoed after the last
    iteration if it completed.
    """
    log_timer = log_timer if log_timer is not None else LogTimer(DEFAULT_LOG_INTERVAL_S)
    timing = Timing()
    report = BenchmarkReport(result=None, timing=timing)

    echo(f"length: {len(acceleration)} step: {config.subdivisions} iterations: {config.iterations}")

    for it in range(config.iterations):
        try:
            velocity = allocate_velocity_table(len(acceleration))
            start = time.perf_counter()
            result = run(config, acceleration, velocity)
        except IndexOutOfRange as e:
            echo(f"iteration {it} failed: {e}")
            report.failures.append(f"iteration {it}: {e}")
            continue
        except AllocationFailure as e:
            echo(f"iteration {it} aborted: {e}")
            report.failures.append(f"iteration {it}: {e}")
            report.aborted = True
            break

        timing.update(time.perf_counter() - start)
        report.result = result
        report.completed += 1

        if log_timer.update():
            echo(f"iteration: {it} {timing}")

        if it == config.iterations - 1:
            echo(f"final velocity: {result.final_velocity:+}")
            echo(f"final position: {result.final_position:+}")

    echo(str(timing))
    return report


def build_summary(config: SimulationConfig, acceleration: SampleTable, report: BenchmarkReport) -> dict:
    result = report.result
    return {
        "method": config.method.value,
        "subdivisions": config.subdivisions,
        "effective_subdivisions": config.rule().effective_subdivisions(config.subdivisions),
        "threads": config.thread_count,
        "iterations": config.iterations,
        "samples": len(acceleration),
        "completed_iterations": report.completed,
        "failed_iterations": len(report.failures),
        "aborted": report.aborted,
        "final_velocity": result.final_velocity if result is not None else None,
        "final_position": result.final_position if result is not None else None,
        "timing": report.timing.as_dict(),
    }


def write_outputs(
    out_dir: Path,
    config: SimulationConfig,
    acceleration: SampleTable,
    report: BenchmarkReport,
    *,
    plot: bool = False,
) -> dict:
    """Write trajectory.csv / summary.json (and trajectory.png) for the last completed run."""
    out_dir.mkdir(parents=True, exist_ok=True)
    summary = build_summary(config, acceleration, report)

    if report.result is not None:
        velocity = report.result.velocity
        position = integrate_profile(velocity, config.rule(), config.subdivisions)
        time_s = acceleration.time_s()
        write_trajectory_csv(out_dir / "trajectory.csv", time_s, acceleration.values, velocity.values, position)

        if plot:
            plot_trajectory(
                time_s,
                acceleration.values,
                velocity.values,
                position,
                out_dir / "trajectory.png",
                title=f"Trajectory ({config.method.value}, {config.subdivisions} subdivisions)",
            )

    write_summary_json(out_dir / "summary.json", summary)
    return summary


def run_simulate(settings: RunSettings, acceleration: SampleTable, echo=print) -> dict:
    """Benchmark with the configured settings and write outputs if an output dir is set."""
    config = settings.simulation
    echo(f"Method: {config.method.value}, threads: {config.thread_count}")

    report = run_benchmark(
        config,
        acceleration,
        log_timer=LogTimer(settings.log_interval_s),
        echo=echo,
    )
    summary = build_summary(config, acceleration, report)

    if settings.output_dir is not None:
        summary = write_outputs(settings.output_dir, config, acceleration, report, plot=settings.plot)
        echo(f"\nResults written to {settings.output_dir}/")

    return summary
