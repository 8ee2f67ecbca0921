"""
Round state machine.

States: pending at attempt n (1-based), won, lost. Won and lost are terminal.
One valid guess moves pending(n) to won (all exact), lost (n == max_attempts)
or pending(n + 1).
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .engine import score_guess, is_win
from .errors import InvalidConfiguration
from .schemas import RoundResult
from .types import RoundStatus, Verdict, Word

logger = logging.getLogger(__name__)

GuessSource = Callable[[int], Word]


@dataclass(frozen=True)
class AttemptEntry:
    attempt: int
    guess: Word
    verdict: Verdict


@dataclass
class Round:
    secret: Word
    max_attempts: int = 6
    attempt: int = 1
    status: RoundStatus = "pending"
    history: List[AttemptEntry] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise InvalidConfiguration(f"max_attempts must be at least 1, got {self.max_attempts}.")

    @classmethod
    def start(cls, secret: Word, max_attempts: int) -> "Round":
        return cls(secret=secret, max_attempts=max_attempts)

    @property
    def finished(self) -> bool:
        return self.status != "pending"

    def result(self) -> RoundResult:
        if not self.finished:
            raise RuntimeError("Round is still in progress.")
        return RoundResult(
            status=self.status,
            attempts_used=len(self.history),
            secret=self.secret,
        )


def submit(game: Round, guess: Word) -> Optional[AttemptEntry]:
    """
    Score one pre-validated guess and advance the round.
    Returns the new history entry, or None if the round had already ended
    (extra guesses are ignored and change nothing).
    """
    if game.finished:
        return None

    verdict = score_guess(guess, game.secret)
    entry = AttemptEntry(attempt=game.attempt, guess=guess, verdict=verdict)
    game.history.append(entry)

    if is_win(verdict):
        game.status = "won"
    elif game.attempt == game.max_attempts:
        game.status = "lost"
    else:
        game.attempt += 1

    logger.debug("attempt %d scored, round is %s", entry.attempt, game.status)
    return entry


def run_round(secret: Word, max_attempts: int, guess_source: GuessSource, reporter) -> Round:
    """
    Drive one round to won or lost.

    guess_source(attempt) is called once per attempt and must return a valid Word;
    re-prompting on bad input is its job, not ours.
    reporter.verdict(entry) is called once per attempt, then
    reporter.outcome(result) once when the round ends.
    """
    game = Round.start(secret, max_attempts)

    while not game.finished:
        guess = guess_source(game.attempt)
        entry = submit(game, guess)
        reporter.verdict(entry)

    reporter.outcome(game.result())
    return game
