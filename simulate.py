#!/usr/bin/env -S uv run

from train_sim.cli import main


if __name__ == "__main__":
    main()
