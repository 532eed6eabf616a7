"""
A word guessing game: guess the hidden word, one scored row at a time.

Usage:
    from wordle_marathon import WordSource, run_round

    source = WordSource(length=5)
    candidates = source.load_candidates()
    run_round(boundary, candidates, source.select_target(candidates), attempt_limit=6)
"""

from .errors import InvalidGuess, NoCandidates, RoundOver, SourceUnavailable, WordleError
from .words import WordSource, read_word_list
from .scoring import Hint, ScoredGuess, score, letter_summary
from .round import Round, RoundState
from .turn_loop import QUIT, Boundary, QuitSignal, run_round
from .marathon import Marathon, MarathonOutcome, MarathonState, run_marathon
from .config import GameConfig

__all__ = [
    # Core
    "WordSource",
    "read_word_list",
    "score",
    "letter_summary",
    "Round",
    "run_round",
    "Marathon",
    "run_marathon",
    "GameConfig",

    # Types
    "Hint",
    "ScoredGuess",
    "RoundState",
    "MarathonOutcome",
    "MarathonState",
    "Boundary",
    "QuitSignal",
    "QUIT",

    # Errors
    "WordleError",
    "SourceUnavailable",
    "NoCandidates",
    "InvalidGuess",
    "RoundOver",
]
