"""State of a single puzzle: target, attempts and scored guesses."""

import logging
from enum import Enum
from typing import Callable, List, Optional, Set

from wordle_marathon.errors import InvalidGuess, RoundOver
from wordle_marathon.scoring import ScoredGuess, score

logger = logging.getLogger(__name__)


class RoundState(Enum):
    ACTIVE = "active"
    WON = "won"
    LOST = "lost"
    QUIT = "quit"


class Round:
    def __init__(self, target: str, candidates: Set[str], attempt_limit: int,
                 is_legal: Callable[[str], bool] = None):
        if attempt_limit < 1:
            raise ValueError(f"Attempt limit must be at least 1, got {attempt_limit}")
        self.target = target.upper()
        self.candidates = candidates
        self.attempt_limit = attempt_limit
        self.is_legal = is_legal or (lambda word: True)
        self.attempts = 0
        self.history: List[ScoredGuess] = []
        self.state = RoundState.ACTIVE

    @property
    def word_length(self) -> int:
        return len(self.target)

    @property
    def remaining(self) -> int:
        return self.attempt_limit - self.attempts

    @property
    def is_over(self) -> bool:
        return self.state is not RoundState.ACTIVE

    @property
    def outcome(self) -> Optional[RoundState]:
        """The terminal state, or None while the round is still being played."""
        return self.state if self.is_over else None

    def validate(self, guess: str) -> str:
        """Returns the normalized guess, or raises InvalidGuess."""
        word = guess.strip().upper()
        if len(word) != self.word_length:
            raise InvalidGuess(word, InvalidGuess.LENGTH, self.word_length)
        if not self.is_legal(word):
            raise InvalidGuess(word, InvalidGuess.ILLEGAL)
        if word not in self.candidates:
            raise InvalidGuess(word, InvalidGuess.DICTIONARY)
        return word

    def submit(self, guess: str) -> ScoredGuess:
        """Scores a guess and records it. Invalid guesses leave the round untouched."""
        self._check_active()
        word = self.validate(guess)
        scored = score(word, self.target)
        self.history.append(scored)
        self.attempts += 1
        if word == self.target:
            self.state = RoundState.WON
        elif self.attempts == self.attempt_limit:
            self.state = RoundState.LOST
        logger.debug("Attempt %d/%d: %s -> %s", self.attempts, self.attempt_limit, word, scored.feedback)
        if self.is_over:
            logger.info("Round %s after %d attempts", self.state.value, self.attempts)
        return scored

    def quit(self) -> None:
        self._check_active()
        self.state = RoundState.QUIT
        logger.info("Round quit after %d attempts", self.attempts)

    def _check_active(self):
        if self.is_over:
            raise RoundOver(f"Round is already {self.state.value}")
