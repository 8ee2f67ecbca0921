"""
Testing pure scoring logic.
"""

import itertools

import pytest

from wordle.engine import score_guess, is_win
from wordle.errors import InvalidInput

E, P, A = "exact", "present", "absent"

def test_score_guess_no_matches():
    verdict = score_guess("BUMPY", "CRANE")
    assert verdict == (A, A, A, A, A)

def test_score_guess_same_word_is_all_exact():
    assert score_guess("CRANE", "CRANE") == (E, E, E, E, E)

@pytest.mark.parametrize(
    "guess, secret, expected",
    [
        # second L loses: the only L in LIGHT went to position 0
        ("LILAC", "LIGHT", (E, E, A, A, A)),
        ("STEEL", "SPELL", (E, A, E, A, E)),
        ("ODDLY", "BOOZY", (P, A, A, A, E)),
        ("TERRI", "RIVET", (P, P, P, A, P)),
    ],
)
def test_score_guess_duplicate_letters(guess, secret, expected):
    assert score_guess(guess, secret) == expected

def test_earlier_guess_position_wins_the_only_copy():
    # one E in the secret, three in the guess, none in place
    assert score_guess("EEEXY", "ABCDE") == (P, A, A, A, A)

def test_exact_match_beats_earlier_present_claim():
    # the E at index 4 is exact, so the leading E must not take it
    assert score_guess("EABCE", "XYZWE") == (A, A, A, A, E)

def test_extra_secret_copies_are_ignored():
    assert score_guess("ALLOY", "LLAMA") == (P, E, P, A, A)

@pytest.mark.parametrize("guess, secret", [
    ("CRANES", "CRANE"),
    ("CRAN", "CRANE"),
    ("CRANE", "CRAN"),
    ("CR4NE", "CRANE"),
    ("", "CRANE"),
])
def test_score_guess_rejects_malformed_words(guess, secret):
    with pytest.raises(InvalidInput):
        score_guess(guess, secret)

def test_exact_plus_present_never_exceeds_secret_count():
    words = ["SPELL", "STEEL", "LLAMA", "ALLOY", "EERIE", "GEESE", "TERRI", "RIVET", "BOOZY", "ODDLY"]
    for guess, secret in itertools.product(words, repeat=2):
        verdict = score_guess(guess, secret)
        assert len(verdict) == 5
        for letter in set(guess):
            hits = sum(
                1 for g, mark in zip(guess, verdict) if g == letter and mark != "absent"
            )
            assert hits <= secret.count(letter)
        for i, mark in enumerate(verdict):
            assert (mark == "exact") == (guess[i] == secret[i])

def test_is_win_true_and_false():
    assert is_win((E, E, E, E, E)) is True
    assert is_win((E, E, E, E, P)) is False
    assert is_win((E, E, E, E)) is False
