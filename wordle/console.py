"""
Terminal collaborators: reading the word list, asking for guesses,
and printing hints and results. The game core never touches stdin/stdout.
"""

import logging
from pathlib import Path
from typing import Callable, List

from pydantic import ValidationError

from .game import AttemptEntry
from .schemas import RoundResult, StatsOut, parse_word
from .types import Verdict, Word

logger = logging.getLogger(__name__)

INVALID_GUESS_MESSAGE = "Invalid guess. Must be exactly 5 letters."


def read_word_list(path) -> List[str]:
    """Raw lines of a word-list file; an unreadable file gives an empty list."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().splitlines()
    except OSError as exc:
        logger.warning("could not read word list %s: %s", path, exc)
        return []


class ConsoleGuessSource:
    """Ask until the player types a valid word. EOFError is left to the caller."""

    def __init__(self, input_fn: Callable[[str], str] = input, output_fn: Callable[[str], None] = print) -> None:
        self.input_fn = input_fn
        self.output_fn = output_fn

    def __call__(self, attempt: int) -> Word:
        while True:
            raw = self.input_fn(f"Attempt {attempt}: ")
            try:
                return parse_word(raw)
            except ValidationError:
                self.output_fn(INVALID_GUESS_MESSAGE)


def render_verdict(guess: Word, verdict: Verdict) -> str:
    # exact -> "A", present -> "a", absent -> "?"
    parts = []
    for letter, mark in zip(guess, verdict):
        if mark == "exact":
            parts.append(letter.upper())
        elif mark == "present":
            parts.append(letter.lower())
        else:
            parts.append("?")
    return " ".join(parts)


class ConsoleReporter:
    def __init__(self, output_fn: Callable[[str], None] = print) -> None:
        self.output_fn = output_fn

    def verdict(self, entry: AttemptEntry) -> None:
        self.output_fn(f"Hint: {render_verdict(entry.guess, entry.verdict)}")

    def outcome(self, result: RoundResult) -> None:
        if result.status == "won":
            self.output_fn(
                f"Congratulations, you guessed the word: {result.secret} "
                f"(attempt {result.attempts_used})"
            )
        else:
            self.output_fn(f"Out of attempts. The word was: {result.secret}")


def render_stats(stats: StatsOut) -> str:
    lines = [
        f"Played: {stats.rounds_started}  Won: {stats.rounds_won}  Lost: {stats.rounds_lost}",
        f"Streak: {stats.current_streak}  Best: {stats.best_streak}",
    ]
    if stats.average_guesses_to_win is not None:
        lines.append(
            f"Average guesses to win: {stats.average_guesses_to_win:.2f}  "
            f"Fastest: {stats.fastest_win_attempts}"
        )
    for attempt in sorted(stats.guess_distribution):
        count = stats.guess_distribution[attempt]
        lines.append(f"  {attempt}: {'#' * count} {count}")
    return "\n".join(lines)
