"""Plain terminal front end: prints the board and reads guesses with input()."""

import string
import sys
from typing import List, Union

from wordle_marathon.scoring import Hint, ScoredGuess, letter_summary
from wordle_marathon.turn_loop import QUIT, QuitSignal

QUIT_COMMANDS = (":q", ":quit")

RESET = "\033[0m"
COLORS = {
    Hint.CORRECT: "\033[1;37;42m",  # green
    Hint.PRESENT: "\033[1;30;43m",  # yellow
    Hint.ABSENT: "\033[1;37;100m",  # gray
}


def tile(letter: str, hint: Hint = None, color: bool = True) -> str:
    if hint is None:
        return f" {letter} "
    if not color:
        return f"{letter}{hint.value} "
    return f"{COLORS[hint]} {letter} {RESET}"


class TerminalBoundary:
    def __init__(self, stdin=None, stdout=None, color: bool = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.color = self.stdout.isatty() if color is None else color
        self.status = ""

    def _print(self, text: str = ""):
        print(text, file=self.stdout)

    def display_status(self, message: str) -> None:
        self.status = message
        if message:
            self._print(message)

    def append_status(self, message: str) -> None:
        self.status += message
        self._print(self.status)

    def render_board(self, rows: List[ScoredGuess], blank_length: int, row_index: int) -> None:
        self._print()
        for scored in rows:
            self._print("".join(tile(letter, hint, self.color) for letter, hint in scored))
        if blank_length and row_index == len(rows):
            self._print("".join(tile("_") for _ in range(blank_length)))
        self._print(self.keyboard(rows))

    def keyboard(self, rows: List[ScoredGuess]) -> str:
        """Alphabet with each letter colored by the best hint seen for it."""
        summary = letter_summary(rows)
        keys = []
        for letter in string.ascii_uppercase:
            hint = summary.get(letter)
            if hint is None:
                keys.append(letter)
            elif self.color:
                keys.append(f"{COLORS[hint]}{letter}{RESET}")
            else:
                keys.append(f"{letter}{hint.value}")
        return " ".join(keys)

    def read_guess(self, expected_length: int) -> Union[str, QuitSignal]:
        prompt = f"Guess ({expected_length} letters, {QUIT_COMMANDS[0]} to quit): "
        self.stdout.write(prompt)
        self.stdout.flush()
        try:
            line = self.stdin.readline()
        except KeyboardInterrupt:
            self._print()
            return QUIT
        if not line:  # EOF
            self._print()
            return QUIT
        guess = line.strip()
        if guess.lower() in QUIT_COMMANDS:
            return QUIT
        return guess
