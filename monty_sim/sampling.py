"""Sampling utilities for Monty Hall Simulator.

Centralized, reproducible randomness. The generator is seeded once per
process and handed to the trial engine as a dependency.
"""

from __future__ import annotations

import time

import numpy as np

# Width of a single draw, matching a 31-bit C ``rand()`` range
DRAW_LIMIT = 2**31


def time_seed() -> int:
    """Seed derived from the wall clock, in whole seconds."""
    return int(time.time())


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create a seeded random number generator.

    Args:
        seed: Random seed. If None, uses a time-derived seed.

    Returns:
        NumPy Generator instance
    """
    if seed is None:
        seed = time_seed()
    return np.random.default_rng(seed)


class RandomSource:
    """Uniform integer source used to place prizes."""

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        if rng is None:
            rng = make_rng()
        self.rng = rng

    def next_draw(self) -> int:
        """Wide non-negative draw in [0, DRAW_LIMIT)."""
        return int(self.rng.integers(0, DRAW_LIMIT))

    def next_uniform(self, max_value: int) -> int:
        """Return an integer in [1, max_value].

        Modulo reduction of a wide draw; the small bias when ``max_value``
        does not divide the draw range is accepted.
        """
        assert max_value >= 1, f"max_value must be >= 1, got {max_value}"
        return self.next_draw() % max_value + 1
