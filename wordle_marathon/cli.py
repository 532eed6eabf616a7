"""Console entry point: `wordle-marathon`."""

import argparse
import logging
import re
import sys

from wordle_marathon.config import GameConfig, parse_length
from wordle_marathon.errors import NoCandidates, SourceUnavailable
from wordle_marathon.marathon import run_marathon
from wordle_marathon.terminal import TerminalBoundary
from wordle_marathon.turn_loop import run_round

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordle-marathon",
        description="Guess the hidden word. Green: right letter, right place. "
                    "Yellow: in the word elsewhere. Gray: not in the word.",
    )
    parser.add_argument('-l', '--length', type=parse_length,
                        help="Word length, e.g. 5, or a range such as 4-7.")
    parser.add_argument('-a', '--attempts', type=int,
                        help="Number of guesses allowed per round.")
    parser.add_argument('-w', '--wordlist',
                        help="Path to an alternate word list file (one word per line).")
    parser.add_argument('--illegal',
                        help="Regular expression of characters a word may not contain.")
    parser.add_argument('-s', '--seed', type=int,
                        help="Seed for picking target words.")
    parser.add_argument('-m', '--marathon', action='store_true',
                        help="Keep playing with longer words and fewer guesses until you lose.")
    parser.add_argument('--no-color', action='store_true',
                        help="Print hints as letters instead of colored tiles.")
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help="Log to stderr (-v info, -vv debug).")
    return parser


def config_from_args(args, config: GameConfig) -> GameConfig:
    if args.length is not None:
        config.word_length = args.length
    if args.attempts is not None:
        config.attempt_limit = args.attempts
    if args.wordlist:
        config.wordlist_path = args.wordlist
    if args.illegal:
        config.illegal_characters = args.illegal
    if args.seed is not None:
        config.seed = args.seed
    config.marathon = config.marathon or args.marathon
    return config


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")

    try:
        config = config_from_args(args, GameConfig.from_env())
    except ValueError as e:
        parser.error(str(e))
    if config.attempt_limit < 1:
        parser.error("--attempts must be at least 1")

    try:
        source = config.word_source()
    except re.error as e:
        parser.error(f"--illegal is not a valid regular expression: {e}")
    boundary = TerminalBoundary(color=False if args.no_color else None)

    if config.marathon:
        run_marathon(boundary, source, config.base_length, config.attempt_limit)
        return 0

    try:
        candidates = source.load_candidates()
    except (SourceUnavailable, NoCandidates) as e:
        logger.debug("Cannot start round", exc_info=True)
        print(f"{parser.prog}: {e}", file=sys.stderr)
        return 1
    target = source.select_target(candidates)
    run_round(boundary, candidates, target, config.attempt_limit, source.is_legal)
    return 0


if __name__ == "__main__":
    sys.exit(main())
