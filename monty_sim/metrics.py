"""Metrics and analysis utilities for Monty Hall Simulator.

Functions for summarizing a batch tally against the theoretical odds.
"""

from __future__ import annotations

import numpy as np

from monty_sim.models import SessionTally


def theoretical_switch_win_rate(door_count: int = 3) -> float:
    """Switch win rate for the single-reveal procedure.

    With one door revealed, switching only wins when the prize sits
    behind door 2 or door 3, so the rate is 2/N rather than (N-1)/N.
    """
    if door_count < 1:
        raise ValueError("door_count must be at least 1")
    if door_count <= 2:
        return 1.0
    return 2.0 / door_count


def win_rate(tally: SessionTally) -> float:
    """Fraction of trials won by switching."""
    if tally.total == 0:
        return 0.0
    return tally.wins / tally.total


def standard_error(tally: SessionTally) -> float:
    """Binomial standard error of the win rate."""
    if tally.total == 0:
        return 0.0
    p = win_rate(tally)
    return float(np.sqrt(p * (1.0 - p) / tally.total))


def confidence_interval(tally: SessionTally, z: float = 1.96) -> tuple[float, float]:
    """Normal-approximation interval for the win rate, clipped to [0, 1]."""
    p = win_rate(tally)
    half = z * standard_error(tally)
    low, high = np.clip([p - half, p + half], 0.0, 1.0)
    return float(low), float(high)


def summary(tally: SessionTally, door_count: int = 3) -> dict[str, float | int]:
    """Generate summary statistics for a batch.

    Args:
        tally: Win/loss counts for the batch
        door_count: Door count the batch was played with

    Returns:
        Dictionary with summary statistics
    """
    expected = theoretical_switch_win_rate(door_count)
    if tally.total == 0:
        return {
            "plays": 0,
            "wins": 0,
            "losses": 0,
            "win_rate": 0.0,
            "standard_error": 0.0,
            "ci_low": 0.0,
            "ci_high": 0.0,
            "expected_win_rate": expected,
            "deviation": 0.0,
        }

    low, high = confidence_interval(tally)
    rate = win_rate(tally)
    return {
        "plays": tally.total,
        "wins": tally.wins,
        "losses": tally.losses,
        "win_rate": rate,
        "standard_error": standard_error(tally),
        "ci_low": low,
        "ci_high": high,
        "expected_win_rate": expected,
        "deviation": rate - expected,
    }
