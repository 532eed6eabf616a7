"""Successive rounds with longer words and fewer attempts."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from wordle_marathon.errors import NoCandidates, SourceUnavailable
from wordle_marathon.round import Round, RoundState
from wordle_marathon.turn_loop import Boundary, play
from wordle_marathon.words import WordSource

logger = logging.getLogger(__name__)

# Every this many rounds the attempt limit drops by one
ATTEMPT_DECAY_ROUNDS = 3


class MarathonOutcome(Enum):
    QUIT = "quit"
    LOST = "lost"
    CHAMPION = "champion"


@dataclass
class MarathonState:
    word_length: int
    attempt_limit: int
    rounds_won: int = 0
    outcome: Optional[MarathonOutcome] = None

    @property
    def round_number(self) -> int:
        """Number of the round being played, or about to be."""
        return self.rounds_won + 1

    @property
    def score(self) -> int:
        if self.outcome is MarathonOutcome.LOST:
            return self.rounds_won + 1
        return self.rounds_won


class Marathon:
    """
    Hands out rounds until the player loses, quits, or the word source
    runs dry. Round n uses words of `base_length + n - 1` letters.
    """

    def __init__(self, source: WordSource, base_length: int, attempt_limit: int):
        self.source = source
        self.state = MarathonState(word_length=base_length, attempt_limit=attempt_limit)

    @property
    def is_over(self) -> bool:
        return self.state.outcome is not None

    def start_round(self) -> Optional[Round]:
        """Sets up the next round. Returns None once no words are left."""
        if self.is_over:
            return None
        number = self.state.round_number
        if number % ATTEMPT_DECAY_ROUNDS == 0:
            self.state.attempt_limit = max(1, self.state.attempt_limit - 1)

        source = self.source.with_length(self.state.word_length)
        try:
            candidates = source.load_candidates()
        except (NoCandidates, SourceUnavailable) as e:
            logger.info("Marathon ends at round %d: %s", number, e)
            self.state.outcome = MarathonOutcome.CHAMPION
            return None
        target = source.select_target(candidates)
        logger.debug("Marathon round %d: %d letters, %d attempts",
                     number, self.state.word_length, self.state.attempt_limit)
        return Round(target, candidates, self.state.attempt_limit, source.is_legal)

    def finish_round(self, outcome: RoundState) -> None:
        if outcome is RoundState.WON:
            self.state.rounds_won += 1
            self.state.word_length += 1
        elif outcome is RoundState.LOST:
            self.state.outcome = MarathonOutcome.LOST
        elif outcome is RoundState.QUIT:
            self.state.outcome = MarathonOutcome.QUIT
        else:
            raise ValueError(f"Round is not finished: {outcome}")

    def final_message(self) -> str:
        outcome = self.state.outcome
        if outcome is MarathonOutcome.CHAMPION:
            return f" Champion! No words left to play. Final score: {self.state.score}"
        if outcome is MarathonOutcome.LOST:
            return f" Marathon over. Final score: {self.state.score}"
        if outcome is MarathonOutcome.QUIT:
            return f" Marathon abandoned. Final score: {self.state.score}"
        return ""


def run_marathon(boundary: Boundary, source: WordSource, base_length: int,
                 attempt_limit: int) -> int:
    """Plays rounds until the marathon ends and returns the final score."""
    marathon = Marathon(source, base_length, attempt_limit)
    while not marathon.is_over:
        rnd = marathon.start_round()
        if rnd is not None:
            marathon.finish_round(play(rnd, boundary))
    boundary.append_status(marathon.final_message())
    logger.info("Marathon %s with score %d", marathon.state.outcome.value, marathon.state.score)
    return marathon.state.score
