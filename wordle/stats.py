"""
In-memory scoreboard
Counts rounds played during this process. Nothing is written to disk.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from .game import Round
from .schemas import StatsOut

@dataclass
class Stats:
    rounds_started: int = 0
    rounds_won: int = 0
    rounds_lost: int = 0

    current_streak: int = 0
    best_streak: int = 0

    total_guesses_in_wins: int = 0
    fastest_win_attempts: Optional[int] = None

    # wins keyed by the attempt number they happened on
    guess_distribution: Dict[int, int] = field(default_factory=dict)


class Scoreboard:
    def __init__(self) -> None:
        self._stats = Stats()

    def record_start(self) -> None:
        self._stats.rounds_started += 1

    def record_end(self, game: Round) -> None:
        """Update the counters for a finished round. Call once per round."""
        if not game.finished:
            raise ValueError("Only finished rounds can be recorded.")

        if game.status == "won":
            self._stats.rounds_won += 1

            # streaks
            self._stats.current_streak += 1
            if self._stats.current_streak > self._stats.best_streak:
                self._stats.best_streak = self._stats.current_streak

            # guesses used
            guesses_used = len(game.history)
            self._stats.total_guesses_in_wins += guesses_used
            if self._stats.fastest_win_attempts is None or guesses_used < self._stats.fastest_win_attempts:
                self._stats.fastest_win_attempts = guesses_used
            self._stats.guess_distribution[guesses_used] = (
                self._stats.guess_distribution.get(guesses_used, 0) + 1
            )
        else:
            self._stats.rounds_lost += 1
            self._stats.current_streak = 0

    def snapshot(self) -> StatsOut:
        stats = self._stats
        avg = (stats.total_guesses_in_wins / stats.rounds_won) if stats.rounds_won > 0 else None
        return StatsOut(
            rounds_started=stats.rounds_started,
            rounds_won=stats.rounds_won,
            rounds_lost=stats.rounds_lost,
            current_streak=stats.current_streak,
            best_streak=stats.best_streak,
            average_guesses_to_win=avg,
            fastest_win_attempts=stats.fastest_win_attempts,
            guess_distribution=dict(stats.guess_distribution),
        )

    def reset(self) -> None:
        self._stats = Stats()
