"""Scoring of a guess against the target word."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, Tuple


class Hint(str, Enum):
    CORRECT = "G"
    PRESENT = "Y"
    ABSENT = "X"


# Higher rank wins when summarizing the hints seen for a letter
_RANK = {Hint.ABSENT: 0, Hint.PRESENT: 1, Hint.CORRECT: 2}


@dataclass(frozen=True)
class ScoredGuess:
    """A guess and the hint for each of its letters."""
    word: str
    hints: Tuple[Hint, ...]

    def __iter__(self) -> Iterator[Tuple[str, Hint]]:
        return iter(zip(self.word, self.hints))

    def __len__(self) -> int:
        return len(self.word)

    @property
    def feedback(self) -> str:
        """Hints as a G/Y/X string, e.g. 'XGGYG'."""
        return "".join(hint.value for hint in self.hints)

    @property
    def solved(self) -> bool:
        return all(hint is Hint.CORRECT for hint in self.hints)


def score(guess: str, target: str) -> ScoredGuess:
    """
    Scores each letter of the guess against the target.

    A letter that is not in place is only marked present on its last
    occurrence in the guess, and never once the same letter has been
    marked correct earlier in the guess. When the target repeats a letter
    this can differ from count-based scoring.
    """
    if len(guess) != len(target):
        raise ValueError(f"Guess '{guess}' and target '{target}' differ in length")

    hints = []
    exact_claimed = set()
    for i, letter in enumerate(guess):
        if letter == target[i]:
            hints.append(Hint.CORRECT)
            exact_claimed.add(letter)
        elif letter in target and letter not in guess[i + 1:] and letter not in exact_claimed:
            hints.append(Hint.PRESENT)
        else:
            hints.append(Hint.ABSENT)
    return ScoredGuess(guess, tuple(hints))


def letter_summary(history: Iterable[ScoredGuess]) -> Dict[str, Hint]:
    """Best hint seen so far for every guessed letter."""
    summary = {}
    for scored in history:
        for letter, hint in scored:
            if letter not in summary or _RANK[hint] > _RANK[summary[letter]]:
                summary[letter] = hint
    return summary
