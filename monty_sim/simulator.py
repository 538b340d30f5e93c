"""Simulation engine for Monty Hall Simulator.

Contains the trial procedure and batch runner.
"""

from __future__ import annotations

from typing import Any, Protocol

from monty_sim.models import DoorSet, Outcome, SessionTally
from monty_sim.sampling import RandomSource

STANDARD_DOORS = 3
INITIAL_CHOICE = 0


class UniformSource(Protocol):
    """Anything that can draw an integer in [1, max_value]."""

    def next_uniform(self, max_value: int) -> int: ...


def host_reveal(doors: DoorSet, choice: int) -> int | None:
    """Index of the first door that is neither chosen nor prize-bearing.

    Returns None when no such door exists (one door, or two doors with
    the prize behind the second).
    """
    for i, door in enumerate(doors):
        if i != choice and not door.has_prize:
            return i
    return None


def switch_target(doors: DoorSet, choice: int, host_door: int | None) -> int:
    """Index of the first door that is neither the host's nor the choice.

    Falls back to keeping ``choice`` when every other door is excluded.
    """
    for i in range(len(doors)):
        if i != choice and i != host_door:
            return i
    return choice


class TrialEngine:
    """Runs Monty Hall trials against an injected random source."""

    def __init__(self, source: UniformSource | None = None) -> None:
        if source is None:
            source = RandomSource()
        self.source = source

    def setup_doors(self, door_count: int) -> DoorSet:
        """Build ``door_count`` closed doors with a uniformly placed prize."""
        assert door_count >= 1, f"door_count must be >= 1, got {door_count}"
        prize_door = self.source.next_uniform(door_count) - 1
        return DoorSet.with_prize_at(door_count, prize_door)

    def simulate_once(self, door_count: int = STANDARD_DOORS) -> dict[str, Any]:
        """Run a single trial with the always-switch strategy.

        Returns dict with doors, prize_door, initial_choice, host_door,
        final_choice, outcome.
        """
        # Step 1: Place the prize
        doors = self.setup_doors(door_count)

        # Step 2: Player always starts on door 1
        choice = INITIAL_CHOICE

        # Step 3: Host opens the lowest-index losing door
        host_door = host_reveal(doors, choice)
        if host_door is not None:
            doors.open(host_door)

        # Step 4: Switch and open the final choice
        final_choice = switch_target(doors, choice, host_door)
        doors.open(final_choice)

        outcome = Outcome.WIN if doors[final_choice].has_prize else Outcome.LOSS

        return {
            "doors": doors,
            "prize_door": doors.prize_door,
            "initial_choice": choice,
            "host_door": host_door,
            "final_choice": final_choice,
            "outcome": outcome,
        }

    def run_trial(self, door_count: int = STANDARD_DOORS) -> Outcome:
        """Run one trial and return only its outcome."""
        return self.simulate_once(door_count)["outcome"]

    def run_batch(
        self,
        num_plays: int,
        door_count: int = STANDARD_DOORS,
        tally: SessionTally | None = None,
        progress: bool = False,
    ) -> SessionTally:
        """Run ``num_plays`` trials into ``tally`` and return it.

        Non-positive ``num_plays`` runs no trials.
        """
        if tally is None:
            tally = SessionTally()

        for i in range(max(0, num_plays)):
            tally.record(self.run_trial(door_count))

            # Lightweight progress logging every ~5% or on last
            if progress and num_plays >= 20:
                step = max(1, num_plays // 20)
                if (i + 1) % step == 0 or i + 1 == num_plays:
                    print(f"Progress: {i + 1}/{num_plays}")

        return tally
