"""Interactive session loop for Monty Hall Simulator.

Reads a play count, runs a batch, prints the tally and asks whether to
play again, until the user declines or input runs out.
"""

from __future__ import annotations

import sys
from enum import Enum, auto
from typing import TextIO

from monty_sim.models import SessionTally
from monty_sim.simulator import STANDARD_DOORS, TrialEngine

WELCOME = "Welcome to the Monty Hall Problem Simulator!\n"

RULES = (
    "Monty Hall Problem:\n"
    "Suppose you're on a game show, and you're given the choice of three "
    "doors: Behind one door is a car; behind the others, goats. You pick a "
    "door, say No. 1, and the host, who knows what's behind the doors, opens "
    "another door, say No. 3, which has a goat. He then says to you, \"Do you "
    "want to pick door No. 2?\" Is it to your advantage to switch your choice?"
)

PLAYS_PROMPT = "How many plays: "
REPLAY_PROMPT = "Play Again? (Y/N): "
FAREWELL = "Bye!"


class SessionState(Enum):
    """Progress of the interactive loop."""

    AWAITING_PLAY_COUNT = auto()
    RUNNING_BATCH = auto()
    AWAITING_REPLAY = auto()
    DONE = auto()


class PromptReader:
    """Whitespace-delimited reader over a text stream.

    Lines are pulled lazily so each prompt is answered before the next
    one is printed.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self.buffer = ""

    def _fill(self) -> bool:
        """Pull lines until the buffer holds a non-whitespace character."""
        while not self.buffer.strip():
            line = self.stream.readline()
            if not line:
                return False
            self.buffer = line
        self.buffer = self.buffer.lstrip()
        return True

    def read_token(self) -> str | None:
        """Next whitespace-delimited token, or None at end of input."""
        if not self._fill():
            return None
        parts = self.buffer.split(maxsplit=1)
        self.buffer = parts[1] if len(parts) > 1 else ""
        return parts[0]

    def read_int(self, default: int = 0) -> int:
        """Next token as an integer; ``default`` if missing or malformed."""
        token = self.read_token()
        if token is None:
            return default
        try:
            return int(token)
        except ValueError:
            return default

    def read_char(self) -> str | None:
        """Next non-whitespace character, or None at end of input."""
        if not self._fill():
            return None
        char, self.buffer = self.buffer[0], self.buffer[1:]
        return char


class Session:
    """Interactive play/replay loop around a TrialEngine."""

    def __init__(
        self,
        engine: TrialEngine,
        door_count: int = STANDARD_DOORS,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.engine = engine
        self.door_count = door_count
        self.reader = PromptReader(stdin if stdin is not None else sys.stdin)
        self.stdout = stdout if stdout is not None else sys.stdout
        self.state = SessionState.AWAITING_PLAY_COUNT
        self.batches: list[tuple[int, SessionTally]] = []

    def _write(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self.stdout, flush=True)

    def intro(self) -> None:
        self._write(WELCOME)
        self._write(RULES)

    def play_batch(self) -> SessionTally:
        """Prompt for a play count, run it, print the tally."""
        self._write()
        self._write(PLAYS_PROMPT, end="")
        num_plays = self.reader.read_int()

        self.state = SessionState.RUNNING_BATCH
        tally = self.engine.run_batch(num_plays, self.door_count)
        self.batches.append((num_plays, tally))

        self._write(f"Times win car after switching choice: {tally.wins}")
        self._write(f"Times win goat after switching choice: {tally.losses}")
        self._write()
        return tally

    def ask_replay(self) -> bool:
        self._write(REPLAY_PROMPT, end="")
        return self.reader.read_char() in ("Y", "y")

    def run(self) -> int:
        """Run the loop to completion and return the exit status."""
        self.intro()
        self.state = SessionState.AWAITING_PLAY_COUNT
        while self.state is not SessionState.DONE:
            self.play_batch()
            self.state = SessionState.AWAITING_REPLAY
            if self.ask_replay():
                self.state = SessionState.AWAITING_PLAY_COUNT
            else:
                self.state = SessionState.DONE
        self._write(FAREWELL)
        return 0
