import random
from pathlib import Path

import pytest

from wordle_marathon.turn_loop import QUIT


class ScriptedBoundary:
    """Replays a fixed list of guesses and records everything shown to the player."""

    def __init__(self, guesses):
        self.guesses = list(guesses)
        self.status = ""
        self.statuses = []
        self.boards = []
        self.reads = []

    def display_status(self, message):
        self.status = message
        self.statuses.append(message)

    def append_status(self, message):
        self.status += message

    def render_board(self, rows, blank_length, row_index):
        self.boards.append((list(rows), blank_length, row_index))

    def read_guess(self, expected_length):
        self.reads.append(expected_length)
        if not self.guesses:
            return QUIT
        return self.guesses.pop(0)


@pytest.fixture
def boundary_factory():
    return ScriptedBoundary


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def wordlist(tmp_path: Path):
    """Writes the given words to a word list file and returns its path."""
    def _write(*words, name="words.txt"):
        path = tmp_path / name
        path.write_text("\n".join(words) + "\n", encoding="utf-8")
        return path
    return _write
