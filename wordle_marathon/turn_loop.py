"""
Drives one round against an interaction boundary.

The boundary is whatever draws the board and reads guesses (a terminal,
a test double). It only has to provide the methods of `Boundary`.
"""

import logging
from typing import Callable, List, Protocol, Set, Union

from wordle_marathon.errors import InvalidGuess
from wordle_marathon.round import Round, RoundState
from wordle_marathon.scoring import ScoredGuess

logger = logging.getLogger(__name__)


class QuitSignal:
    """Returned by `Boundary.read_guess` when the player gives up."""

    def __repr__(self):
        return "QUIT"


QUIT = QuitSignal()


class Boundary(Protocol):
    def display_status(self, message: str) -> None:
        """Replaces the status text."""

    def append_status(self, message: str) -> None:
        """Adds to the end of the status text."""

    def render_board(self, rows: List[ScoredGuess], blank_length: int, row_index: int) -> None:
        """Draws the scored rows and a blank row of `blank_length` at `row_index`."""

    def read_guess(self, expected_length: int) -> Union[str, QuitSignal]:
        """Blocks until the player submits a guess or quits."""


def outcome_message(rnd: Round) -> str:
    if rnd.state is RoundState.WON:
        return "You won"
    if rnd.state is RoundState.LOST:
        return f"You lost, the word was {rnd.target}"
    if rnd.state is RoundState.QUIT:
        return f"The word was {rnd.target}, quitter"
    return ""


def play(rnd: Round, boundary: Boundary) -> RoundState:
    """Plays an already created round to its end."""
    while not rnd.is_over:
        boundary.render_board(rnd.history, rnd.word_length, rnd.attempts)
        guess = boundary.read_guess(rnd.word_length)
        if isinstance(guess, QuitSignal):
            rnd.quit()
            break
        try:
            rnd.submit(guess)
        except InvalidGuess as e:
            logger.debug("Rejected guess %r: %s", guess, e.reason)
            boundary.display_status(str(e))
            continue
        boundary.display_status("")

    # no blank row once the round is over
    boundary.render_board(rnd.history, 0, rnd.attempts)
    boundary.display_status(outcome_message(rnd))
    return rnd.state


def run_round(boundary: Boundary, candidates: Set[str], target: str, attempt_limit: int,
              is_legal: Callable[[str], bool] = None) -> RoundState:
    """Plays one round and returns its terminal state."""
    rnd = Round(target, candidates, attempt_limit, is_legal)
    logger.debug("Starting round: %d letters, %d attempts, %d candidates",
                 rnd.word_length, attempt_limit, len(candidates))
    return play(rnd, boundary)
