"""
Pure game logic (no terminal, no storage).
For each guess we compute one mark per position:
- "exact":   same letter at the same position in the secret
- "present": letter appears at another secret position that nothing else claimed
- "absent":  no unclaimed copy of the letter is left in the secret

Duplicates are allowed in both words, so every secret letter can be claimed
at most once. Exact matches claim first, then guess positions left to right.
"""

from .errors import InvalidInput
from .types import WORD_LENGTH, Verdict, Word

def _check_word(word: Word, role: str) -> None:
    if not isinstance(word, str) or len(word) != WORD_LENGTH or not word.isalpha():
        raise InvalidInput(f"{role} must be exactly {WORD_LENGTH} letters, got {word!r}.")

def score_guess(guess: Word, secret: Word) -> Verdict:
    """
    Example:
      guess  = "LILAC"
      secret = "LIGHT"
      -> ("exact", "exact", "absent", "absent", "absent")
      The L at index 0 is exact and uses up the only L in LIGHT,
      so the second L (index 2) is absent.
    """

    # 0. Both words must be well formed; never return a short verdict
    _check_word(guess, "Guess")
    _check_word(secret, "Secret")

    marks = ["absent"] * WORD_LENGTH
    secret_used = [False] * WORD_LENGTH

    # 1. Exact pass: claim matching positions on both sides
    i = 0
    while i < WORD_LENGTH:
        if guess[i] == secret[i]:
            marks[i] = "exact"
            secret_used[i] = True
        i += 1

    # 2. Presence pass: earlier guess positions get first pick
    i = 0
    while i < WORD_LENGTH:
        if marks[i] != "exact":
            # first unclaimed copy in the secret, scanning left to right
            j = 0
            while j < WORD_LENGTH:
                if not secret_used[j] and secret[j] == guess[i]:
                    marks[i] = "present"
                    secret_used[j] = True
                    break
                j += 1
        i += 1

    return tuple(marks)

def is_win(verdict: Verdict) -> bool:
    """
    Win = every position is exact.
    A verdict with the wrong length never wins.
    """
    if len(verdict) != WORD_LENGTH:
        return False
    for mark in verdict:
        if mark != "exact":
            return False
    return True
