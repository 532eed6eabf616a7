"""Exceptions raised by the game engine."""


class WordleError(Exception):
    """Base class for recoverable game errors."""


class SourceUnavailable(WordleError):
    """The backing word list could not be read."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read word list '{path}': {reason}")


class NoCandidates(WordleError):
    """No legal word survived the filter for the requested lengths."""

    def __init__(self, min_length: int, max_length: int):
        self.min_length = min_length
        self.max_length = max_length
        if min_length == max_length:
            span = f"{min_length} letters"
        else:
            span = f"{min_length}-{max_length} letters"
        super().__init__(f"No legal words of {span} in the word list")


class InvalidGuess(WordleError):
    """A guess was rejected before scoring. The message is shown to the player."""

    LENGTH = "length"
    ILLEGAL = "illegal"
    DICTIONARY = "dictionary"

    def __init__(self, guess: str, reason: str, expected_length: int = None):
        self.guess = guess
        self.reason = reason
        if reason == self.LENGTH:
            message = f"Guess must be {expected_length} letters"
        else:
            message = f"{guess} is not in the dictionary"
        super().__init__(message)


class RoundOver(RuntimeError):
    """A finished round was asked to take another turn."""
