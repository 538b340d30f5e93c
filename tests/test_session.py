"""Tests for session module."""

import io

from monty_sim.sampling import RandomSource, make_rng
from monty_sim.session import (
    FAREWELL,
    PLAYS_PROMPT,
    REPLAY_PROMPT,
    PromptReader,
    Session,
    SessionState,
)
from monty_sim.simulator import TrialEngine


class ScriptedSource:
    """Source that places prizes at a fixed sequence of door indices."""

    def __init__(self, prize_doors):
        self.prize_doors = list(prize_doors)

    def next_uniform(self, max_value):
        return self.prize_doors.pop(0) + 1


def make_session(text, source=None):
    if source is None:
        source = RandomSource(make_rng(42))
    stdout = io.StringIO()
    session = Session(TrialEngine(source), stdin=io.StringIO(text), stdout=stdout)
    return session, stdout


def test_prompt_reader_tokens():
    """Test reader splits tokens across and within lines."""
    reader = PromptReader(io.StringIO("3 y\n\n  12\nN"))

    assert reader.read_int() == 3
    assert reader.read_char() == "y"
    assert reader.read_int() == 12
    assert reader.read_char() == "N"
    assert reader.read_char() is None
    assert reader.read_token() is None


def test_prompt_reader_malformed_int():
    """Test a non-integer play count reads as zero and is consumed."""
    reader = PromptReader(io.StringIO("abc\nY\n"))

    assert reader.read_int() == 0
    assert reader.read_char() == "Y"


def test_prompt_reader_end_of_input():
    """Test end of input yields the defaults."""
    reader = PromptReader(io.StringIO(""))

    assert reader.read_int() == 0
    assert reader.read_char() is None


def test_prompt_reader_char_leaves_rest():
    """Test read_char only consumes one character."""
    reader = PromptReader(io.StringIO("  yes\n"))

    assert reader.read_char() == "y"
    assert reader.read_token() == "es"


def test_session_banner_and_prompts():
    """Test output of a single batch session."""
    session, stdout = make_session("3\nN\n", ScriptedSource([0, 1, 2]))

    status = session.run()
    out = stdout.getvalue()

    assert status == 0
    assert out.startswith("Welcome to the Monty Hall Problem Simulator!\n\n")
    assert "Monty Hall Problem:\nSuppose you're on a game show" in out
    assert PLAYS_PROMPT in out
    assert "Times win car after switching choice: 2\n" in out
    assert "Times win goat after switching choice: 1\n" in out
    assert REPLAY_PROMPT in out
    assert out.endswith(FAREWELL + "\n")


def test_session_replay_loop():
    """Test two batches run before the user declines."""
    session, stdout = make_session("2\nY\n1\nN\n")

    session.run()

    assert [plays for plays, _ in session.batches] == [2, 1]
    assert [tally.total for _, tally in session.batches] == [2, 1]
    assert session.state is SessionState.DONE
    out = stdout.getvalue()
    assert out.count(PLAYS_PROMPT) == 2
    assert out.count(FAREWELL) == 1


def test_session_tally_resets_per_batch():
    """Test each batch starts from a fresh tally."""
    session, stdout = make_session(
        "3\ny\n3\nn\n", ScriptedSource([0, 1, 2, 1, 1, 1])
    )

    session.run()

    first, second = (tally for _, tally in session.batches)
    assert (first.wins, first.losses) == (2, 1)
    assert (second.wins, second.losses) == (3, 0)
    assert "Times win car after switching choice: 3\n" in stdout.getvalue()


def test_session_malformed_count_runs_nothing():
    """Test a bad play count runs zero trials."""
    session, stdout = make_session("lots\nN\n")

    session.run()

    assert session.batches[0][0] == 0
    assert session.batches[0][1].total == 0
    assert "Times win car after switching choice: 0\n" in stdout.getvalue()


def test_session_negative_count_runs_nothing():
    """Test a negative play count runs zero trials."""
    session, _ = make_session("-4\nY\n0\nN\n")

    session.run()

    assert [tally.total for _, tally in session.batches] == [0, 0]


def test_session_other_replay_answer_ends():
    """Test any answer besides Y/y ends the session."""
    for answer in ("N", "n", "x", "1"):
        session, stdout = make_session(f"1\n{answer}\n")
        session.run()
        assert len(session.batches) == 1
        assert stdout.getvalue().endswith(FAREWELL + "\n")


def test_session_end_of_input():
    """Test running out of input ends the session."""
    session, stdout = make_session("")

    assert session.run() == 0
    assert len(session.batches) == 1
    assert session.state is SessionState.DONE
    assert stdout.getvalue().endswith(FAREWELL + "\n")


def test_session_same_line_answers():
    """Test play count and replay answer can share a line."""
    session, _ = make_session("2 y 1 n\n")

    session.run()

    assert [plays for plays, _ in session.batches] == [2, 1]
