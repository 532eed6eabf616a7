"""Loading and filtering of candidate words."""

import logging
import random
import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, Iterable, Set, Tuple, Union

from wordle_marathon.errors import NoCandidates, SourceUnavailable

logger = logging.getLogger(__name__)

VOWELS = "AEIOUY"
ILLEGAL_CHARACTERS = r"[^A-Z]"
DEFAULT_WORDLIST = Path(__file__).resolve().parent / "data" / "wordlist.txt"

Length = Union[int, Tuple[int, int]]


def length_bounds(length: Length) -> Tuple[int, int]:
    """Normalizes an exact length or a (min, max) pair to a (min, max) pair."""
    if isinstance(length, int):
        low = high = length
    else:
        low, high = length
    if low < 1 or high < low:
        raise ValueError(f"Invalid word length: {length!r}")
    return low, high


def read_word_list(path) -> Iterable[str]:
    """Reads a line-delimited word list."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return [line.strip() for line in f if line.strip()]
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailable(path, e) from e


@dataclass
class WordSource:
    path: Union[str, Path] = DEFAULT_WORDLIST
    length: Length = 5
    illegal_characters: str = ILLEGAL_CHARACTERS
    loader: Callable[..., Iterable[str]] = read_word_list
    rng: random.Random = field(default_factory=random.Random)

    def __post_init__(self):
        self.min_length, self.max_length = length_bounds(self.length)
        self._illegal = re.compile(self.illegal_characters, re.IGNORECASE)

    def with_length(self, length: Length) -> "WordSource":
        """Same source, different length constraint. The random source is shared."""
        return replace(self, length=length)

    def is_legal(self, word: str) -> bool:
        if not self.min_length <= len(word) <= self.max_length:
            return False
        if not any(vowel in word.upper() for vowel in VOWELS):
            return False
        return self._illegal.search(word) is None

    def load_candidates(self) -> Set[str]:
        """Reads the word list and keeps the legal words, upcased."""
        words = self.loader(self.path)
        candidates = {word for word in (w.strip().upper() for w in words) if self.is_legal(word)}
        if not candidates:
            raise NoCandidates(self.min_length, self.max_length)
        logger.debug("Loaded %d candidates of %d-%d letters from %s",
                     len(candidates), self.min_length, self.max_length, self.path)
        return candidates

    def select_target(self, candidates: Set[str]) -> str:
        # sorted so a seeded rng picks the same word regardless of set ordering
        return self.rng.choice(sorted(candidates))
