from __future__ import annotations

import argparse
from pathlib import Path

from train_sim.commands import run_simulate
from train_sim.datasets import default_acceleration_table
from train_sim.env import env_overrides
from train_sim.io import load_acceleration_csv
from train_sim.quadrature import QuadratureMethod
from train_sim.settings import build_run_settings, read_config


DESCRIPTION = (
    'Runs "train" simulations of a given acceleration profile and reports the '
    "final velocity and position of the train, repeated for benchmarking."
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="train-sim", description=DESCRIPTION)
    parser.add_argument("path", nargs="?", type=Path, help="CSV file to load acceleration data from (default: built-in profile).")
    parser.add_argument("-t", "--threads", type=int, help="Number of threads to use for the simulation.")
    parser.add_argument(
        "-a",
        "--algo",
        help=f"Summation algorithm to use. One of: {', '.join(m.value for m in QuadratureMethod)}.",
    )
    parser.add_argument("-i", "--iterations", type=int, help="Number of times to run the simulation, for benchmarking.")
    parser.add_argument("-s", "--step", type=int, help="Number of subdivisions between each whole second.")
    parser.add_argument("--column", help="Load acceleration data from this column of a CSV file with a header row.")
    parser.add_argument("--config", type=Path, help="Config file to use instead of the packaged config.json.")
    parser.add_argument("--output-dir", type=Path, help="Write trajectory.csv and summary.json to this directory.")
    parser.add_argument("--plot", action="store_true", default=None, help="Also write trajectory.png (needs an output directory).")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    cli = {
        "threads": args.threads,
        "method": args.algo,
        "iterations": args.iterations,
        "subdivisions": args.step,
        "output_dir": str(args.output_dir.resolve()) if args.output_dir is not None else None,
        "plot": args.plot,
    }
    try:
        overrides = env_overrides()
        overrides.update({k: v for k, v in cli.items() if v is not None})
        settings = build_run_settings(read_config(args.config), overrides)
    except ValueError as e:
        raise SystemExit(f"Invalid configuration: {e}") from e

    if args.path is None:
        if args.column is not None:
            raise SystemExit("--column requires a CSV path.")
        acceleration = default_acceleration_table()
    else:
        try:
            acceleration = load_acceleration_csv(args.path, column=args.column)
        except (OSError, ValueError) as e:
            raise SystemExit(f"Failed to load acceleration data: {e}") from e

    summary = run_simulate(settings, acceleration)

    if summary["completed_iterations"] == 0:
        raise SystemExit("No simulation iteration completed.")
