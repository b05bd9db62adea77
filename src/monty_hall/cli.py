"""Command-line entry point for running a simulated batch."""

from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Sequence

from monty_hall.analysis import format_game_table, format_summary_table
from monty_hall.runtime import SimulationConfig, load_simulation_config, run_simulation


def run_simulation_cli(argv: Sequence[str] | None = None) -> int:
    """Play a batch of games and print the strategy summary table.

    Parameters
    ----------
    argv : Sequence[str] | None, optional
        CLI argument list. When ``None``, process arguments are used.

    Returns
    -------
    int
        Exit code (`0` on success).
    """

    parser = argparse.ArgumentParser(description="Simulate the Monty Hall stay/switch game.")
    parser.add_argument("--config", default=None, help="Optional JSON or YAML config path.")
    parser.add_argument("--n-trials", type=int, default=None, help="Number of games to play (default: 100).")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible runs.")
    parser.add_argument(
        "--show-trials",
        action="store_true",
        help="Also print the two-row outcome table of every game.",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)

    config = _resolve_config(args)
    result = run_simulation(config)

    if args.show_trials:
        for trial_index, trial in enumerate(result.trials):
            print(f"Game {trial_index + 1}:")
            print(format_game_table(trial))
            print()

    print(f"Simulation complete: n_trials={result.n_trials}, seed={config.seed}")
    print(format_summary_table(result.summary))
    return 0


def _resolve_config(args: argparse.Namespace) -> SimulationConfig:
    """Merge config file values with explicit command-line flags."""

    if args.config is not None:
        config = load_simulation_config(args.config)
    else:
        config = SimulationConfig()

    # Explicit flags override file values.
    if args.n_trials is not None:
        config = replace(config, n_trials=args.n_trials)
    if args.seed is not None:
        config = replace(config, seed=args.seed)
    return config


def main() -> None:
    """Execute simulation CLI and exit with returned code."""

    raise SystemExit(run_simulation_cli())


if __name__ == "__main__":
    main()


__all__ = ["main", "run_simulation_cli"]
