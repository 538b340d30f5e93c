"""Command-line interface for Monty Hall Simulator.

Provides entry point for the interactive session and a one-shot batch mode.
"""

from __future__ import annotations

import argparse
import json
from typing import Any

from monty_sim.metrics import summary
from monty_sim.sampling import RandomSource, make_rng
from monty_sim.session import Session
from monty_sim.simulator import STANDARD_DOORS, TrialEngine


def positive_int(value: str) -> int:
    """argparse type for integers >= 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Monty Hall Problem Simulator")

    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--doors",
        type=positive_int,
        default=STANDARD_DOORS,
        help="Number of doors per trial",
    )
    parser.add_argument(
        "--plays",
        type=int,
        default=None,
        help="Run a single batch of this many plays without prompting",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Print progress lines in batch mode",
    )
    return parser


def run_monte_carlo(
    engine: TrialEngine, plays: int, door_count: int, progress: bool = False
) -> dict[str, Any]:
    """Run one batch and collect its summary.

    Args:
        engine: Trial engine
        plays: Number of trials
        door_count: Doors per trial
        progress: Print progress lines

    Returns:
        Dictionary with simulation results
    """
    tally = engine.run_batch(plays, door_count, progress=progress)
    return {
        "plays": max(0, plays),
        "doors": door_count,
        "summary": summary(tally, door_count),
    }


def print_results(results: dict[str, Any]) -> None:
    stats = results["summary"]
    print(f"Times win car after switching choice: {stats['wins']}")
    print(f"Times win goat after switching choice: {stats['losses']}")
    print()

    print("Performance Metrics:")
    print(f"Win rate: {stats['win_rate']:.3f}")
    print(f"SE: {stats['standard_error']:.3f}")
    print(f"95% CI: [{stats['ci_low']:.3f}, {stats['ci_high']:.3f}]")
    print(f"Expected: {stats['expected_win_rate']:.3f}")

    # Output JSON to stdout
    print("\n" + "=" * 40)
    print("JSON Output:")
    print(json.dumps(results, indent=2))


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    # Seed once per process
    rng = make_rng(args.seed)
    engine = TrialEngine(RandomSource(rng))

    if args.plays is not None:
        results = run_monte_carlo(engine, args.plays, args.doors, args.progress)
        print_results(results)
        return 0

    return Session(engine, door_count=args.doors).run()


if __name__ == "__main__":
    raise SystemExit(main())
