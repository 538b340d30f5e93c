"""Data models for Monty Hall Simulator.

Contains Door, DoorSet, Outcome and SessionTally with basic validation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Outcome(Enum):
    """Result of a single trial after switching."""

    WIN = "win"
    LOSS = "loss"


@dataclass
class Door:
    """Represents a single door."""

    has_prize: bool = False
    is_open: bool = False

    def open(self) -> None:
        """Open the door. Doors never close again."""
        self.is_open = True


@dataclass
class DoorSet:
    """Represents an ordered set of doors with exactly one prize."""

    doors: list[Door]

    def __post_init__(self) -> None:
        """Validate door count and prize placement."""
        if len(self.doors) < 1:
            raise ValueError("DoorSet must have at least 1 door")
        prizes = sum(1 for door in self.doors if door.has_prize)
        if prizes != 1:
            raise ValueError(f"DoorSet must have exactly 1 prize, got {prizes}")

    @classmethod
    def with_prize_at(cls, door_count: int, prize_door: int) -> DoorSet:
        """Build ``door_count`` closed doors with the prize at ``prize_door``."""
        if not 0 <= prize_door < door_count:
            raise ValueError(
                f"Prize door {prize_door} out of range for {door_count} doors"
            )
        return cls([Door(has_prize=(i == prize_door)) for i in range(door_count)])

    def __len__(self) -> int:
        return len(self.doors)

    def __getitem__(self, index: int) -> Door:
        return self.doors[index]

    @property
    def prize_door(self) -> int:
        """Index of the prize-bearing door."""
        return next(i for i, door in enumerate(self.doors) if door.has_prize)

    @property
    def open_count(self) -> int:
        """Number of doors opened so far."""
        return sum(1 for door in self.doors if door.is_open)

    def open(self, index: int) -> None:
        self.doors[index].open()


@dataclass
class SessionTally:
    """Win/loss counters for one batch of trials."""

    wins: int = 0
    losses: int = 0

    def record(self, outcome: Outcome) -> None:
        """Fold one trial outcome into the tally."""
        if outcome is Outcome.WIN:
            self.wins += 1
        else:
            self.losses += 1

    @property
    def total(self) -> int:
        return self.wins + self.losses
