"""
Tests for wordle_marathon.config

Test Coverage:
- parse_length(): exact lengths and ranges
- GameConfig.from_env(): overrides and malformed values
- GameConfig.word_source(): seeded, configured source
"""

import pytest

from wordle_marathon.config import MAX_ATTEMPTS, WORD_LENGTH, GameConfig, parse_length
from wordle_marathon.words import DEFAULT_WORDLIST


@pytest.mark.parametrize("text, expected", [
    ("5", 5),
    (" 7 ", 7),
    ("4-7", (4, 7)),
    ("6-6", (6, 6)),
])
def test_parse_length(text, expected):
    assert parse_length(text) == expected


@pytest.mark.parametrize("text", ["", "five", "7-4", "0", "-3", "4-"])
def test_parse_length_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_length(text)


def test_defaults():
    config = GameConfig.from_env({})
    assert config.word_length == WORD_LENGTH
    assert config.attempt_limit == MAX_ATTEMPTS
    assert config.wordlist_path == DEFAULT_WORDLIST
    assert config.seed is None
    assert not config.marathon


def test_env_overrides(tmp_path):
    path = str(tmp_path / "words.txt")
    config = GameConfig.from_env({
        "WORDLE_MARATHON_WORDLIST": path,
        "WORDLE_MARATHON_LENGTH": "4-6",
        "WORDLE_MARATHON_ATTEMPTS": "8",
        "WORDLE_MARATHON_SEED": "42",
    })
    assert config.wordlist_path == path
    assert config.word_length == (4, 6)
    assert config.base_length == 4
    assert config.attempt_limit == 8
    assert config.seed == 42


@pytest.mark.parametrize("name, value", [
    ("WORDLE_MARATHON_LENGTH", "long"),
    ("WORDLE_MARATHON_ATTEMPTS", "many"),
    ("WORDLE_MARATHON_ATTEMPTS", "0"),
    ("WORDLE_MARATHON_SEED", "abc"),
])
def test_env_rejects_malformed_values(name, value):
    with pytest.raises(ValueError, match="WORDLE_MARATHON_"):
        GameConfig.from_env({name: value})


def test_word_source_is_seeded(wordlist):
    path = wordlist("crane", "trace", "slate", "brine", "ghost", "lymph")
    config = GameConfig(wordlist_path=path, seed=3)
    first, second = config.word_source(), config.word_source()
    candidates = first.load_candidates()
    assert first.select_target(candidates) == second.select_target(candidates)
    assert first.min_length == first.max_length == 5
