"""
Tests for wordle_marathon.scoring

Test Coverage:
- score(): exact matches, misses, duplicate letters (last occurrence policy)
- ScoredGuess: iteration, feedback string, solved flag
- letter_summary(): best hint per letter
"""

import pytest

from wordle_marathon.scoring import Hint, ScoredGuess, letter_summary, score

G, Y, X = Hint.CORRECT, Hint.PRESENT, Hint.ABSENT


def test_identical_guess_is_all_correct():
    """A guess equal to the target marks every letter correct."""
    result = score("CRANE", "CRANE")
    assert result.hints == (G, G, G, G, G)
    assert result.solved


def test_disjoint_guess_is_all_absent():
    """No shared letters, no hints."""
    result = score("BUMPY", "CRANE")
    assert result.hints == (X, X, X, X, X)
    assert not result.solved


def test_mixed_hints():
    """TRACE against CRANE: T absent, R and A correct, C present, E correct."""
    assert score("TRACE", "CRANE").feedback == "XGGYG"


def test_repeated_letter_only_last_occurrence_is_present():
    """Earlier copies of a repeated guess letter are absent, the last one present."""
    # L is in APPLE once, ALLEY repeats it
    result = score("ALLEY", "APPLE")
    assert result.hints == (G, X, Y, Y, X)


def test_repeated_letter_never_marked_present_twice():
    """An over-represented letter gets at most one present hint."""
    result = score("EERIE", "CRANE")
    assert result.hints == (X, X, Y, X, G)
    assert [hint for letter, hint in result if letter == "E"].count(Y) == 0


def test_letter_already_correct_is_not_also_present():
    """Once a letter is placed, a later copy elsewhere is absent."""
    # E is correct at index 1 and repeated at index 4
    result = score("LEVEE", "HELLO")
    assert result.hints == (Y, G, X, X, X)


def test_target_with_repeated_letter_keeps_simplified_policy():
    """Only one present hint even when the target itself repeats the letter."""
    # Count-based scoring would mark the first S present: BOSSY has a second S
    result = score("ASSET", "BOSSY")
    assert result.hints == (X, X, G, X, X)


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        score("CRANES", "CRANE")


def test_scored_guess_iterates_letter_hint_pairs():
    result = score("TRACE", "CRANE")
    assert list(result) == [("T", X), ("R", G), ("A", G), ("C", Y), ("E", G)]
    assert len(result) == 5
    assert result.word == "TRACE"


def test_hints_compare_as_feedback_letters():
    assert Hint.CORRECT == "G"
    assert Hint.PRESENT == "Y"
    assert Hint.ABSENT == "X"


def test_letter_summary_keeps_best_hint():
    """A letter seen as absent, then present, then correct ends up correct."""
    history = [
        ScoredGuess("TRACE", (X, G, G, Y, G)),
        ScoredGuess("CRANE", (G, G, G, G, G)),
    ]
    summary = letter_summary(history)
    assert summary["C"] is G
    assert summary["T"] is X
    assert "Z" not in summary


def test_letter_summary_does_not_downgrade():
    history = [
        ScoredGuess("AB", (G, X)),
        ScoredGuess("BA", (Y, X)),
    ]
    summary = letter_summary(history)
    assert summary["A"] is G
    assert summary["B"] is Y


def test_letter_summary_empty_history():
    assert letter_summary([]) == {}
