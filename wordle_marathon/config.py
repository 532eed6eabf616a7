"""Game defaults and their environment overrides."""

import os
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from wordle_marathon.words import DEFAULT_WORDLIST, ILLEGAL_CHARACTERS, Length, WordSource, length_bounds

# Constants
WORD_LENGTH = 5
MAX_ATTEMPTS = 6

ENV_WORDLIST = "WORDLE_MARATHON_WORDLIST"
ENV_LENGTH = "WORDLE_MARATHON_LENGTH"
ENV_ATTEMPTS = "WORDLE_MARATHON_ATTEMPTS"
ENV_SEED = "WORDLE_MARATHON_SEED"


def parse_length(text: str) -> Length:
    """'5' -> 5, '4-7' -> (4, 7)."""
    text = text.strip()
    if "-" in text:
        low, _, high = text.partition("-")
        length = (int(low), int(high))
    else:
        length = int(text)
    length_bounds(length)  # raises on nonsense ranges
    return length


@dataclass
class GameConfig:
    word_length: Length = WORD_LENGTH
    attempt_limit: int = MAX_ATTEMPTS
    wordlist_path: Union[str, Path] = DEFAULT_WORDLIST
    illegal_characters: str = ILLEGAL_CHARACTERS
    seed: Optional[int] = None
    marathon: bool = False

    @property
    def base_length(self) -> int:
        """First marathon length; the minimum when a range is configured."""
        return length_bounds(self.word_length)[0]

    def word_source(self) -> WordSource:
        return WordSource(path=self.wordlist_path,
                          length=self.word_length,
                          illegal_characters=self.illegal_characters,
                          rng=random.Random(self.seed))

    @classmethod
    def from_env(cls, environ=None) -> "GameConfig":
        environ = os.environ if environ is None else environ
        config = cls()
        if environ.get(ENV_WORDLIST):
            config.wordlist_path = environ[ENV_WORDLIST]
        for name, attr, parse in ((ENV_LENGTH, "word_length", parse_length),
                                  (ENV_ATTEMPTS, "attempt_limit", int),
                                  (ENV_SEED, "seed", int)):
            value = environ.get(name)
            if not value:
                continue
            try:
                setattr(config, attr, parse(value))
            except ValueError as e:
                raise ValueError(f"{name}={value!r} is invalid: {e}") from e
        if config.attempt_limit < 1:
            raise ValueError(f"{ENV_ATTEMPTS} must be at least 1")
        return config
