'''
Terminal word-guessing game

Usage:
  wordle                        -> one round, 6 attempts, packaged word list
  wordle --rounds 3             -> three rounds, scoreboard at the end
  wordle --rounds 0             -> keep playing until you say no (or words run out)
  wordle --words my_words.txt --attempts 10 --seed 42

Settings can also come from WORDLE_* environment variables or a local .env.

Exit codes:
  0   normal finish
  1   the word list gave no usable words
  2   bad configuration
  130 interrupted (Ctrl-C)

Closing input (Ctrl-D) ends the game normally.
'''

import argparse
import logging
import sys
from typing import Callable, List, Optional

from .config import RANDOM_SOURCES, get_settings
from .console import ConsoleGuessSource, ConsoleReporter, read_word_list, render_stats
from .errors import InvalidConfiguration, PoolExhausted
from .game import run_round
from .pool import WordPool
from .random_client import make_random_source
from .stats import Scoreboard

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wordle", description="Guess the five-letter word.")
    parser.add_argument("--words", help="word list file, one word per line")
    parser.add_argument("--attempts", type=int, help="attempts per round (default 6)")
    parser.add_argument("--seed", type=int, help="seed for reproducible secrets")
    parser.add_argument(
        "--random-source",
        choices=RANDOM_SOURCES,
        help="where random picks come from (default local)",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=1,
        help="rounds to play; 0 asks to play again after each round",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def play_session(
    pool: WordPool,
    max_attempts: int,
    rounds: int,
    guess_source,
    reporter,
    scoreboard: Scoreboard,
    ask_again: Optional[Callable[[], bool]] = None,
) -> int:
    """
    Play rounds until the requested count is reached, the player stops,
    or the pool runs dry. Returns how many rounds were played.
    The first draw is allowed to raise PoolExhausted; later ones just end the session.
    """
    played = 0
    while rounds == 0 or played < rounds:
        try:
            secret = pool.draw()
        except PoolExhausted:
            if played == 0:
                raise
            logger.info("word pool exhausted after %d rounds", played)
            break

        scoreboard.record_start()
        game = run_round(secret, max_attempts, guess_source, reporter)
        scoreboard.record_end(game)
        played += 1

        if rounds == 0 and (ask_again is None or not ask_again()):
            break
    return played


def main(argv: Optional[List[str]] = None, input_fn=input, output_fn=print) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings(
            word_file=args.words,
            max_attempts=args.attempts,
            random_source=args.random_source,
            seed=args.seed,
            log_level="DEBUG" if args.verbose else None,
        )
        if args.rounds < 0:
            raise InvalidConfiguration(f"--rounds must be 0 or more, got {args.rounds}.")
    except InvalidConfiguration as exc:
        output_fn(f"Configuration error: {exc}")
        return 2

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    try:
        rng = make_random_source(settings.random_source, settings.seed)
    except InvalidConfiguration as exc:
        output_fn(f"Configuration error: {exc}")
        return 2

    pool = WordPool.load(read_word_list(settings.word_file), rng=rng)
    logger.info("word pool ready: %d words from %s", len(pool), settings.word_file)

    def ask_again() -> bool:
        # closed input at this prompt just means "no"
        try:
            answer = input_fn("Play again? [y/N] ")
        except EOFError:
            return False
        return answer.strip().lower() in ("y", "yes")

    scoreboard = Scoreboard()
    output_fn(f"Welcome to Wordle. You have {settings.max_attempts} attempts.")

    try:
        played = play_session(
            pool,
            settings.max_attempts,
            args.rounds,
            ConsoleGuessSource(input_fn=input_fn, output_fn=output_fn),
            ConsoleReporter(output_fn=output_fn),
            scoreboard,
            ask_again=ask_again,
        )
    except PoolExhausted:
        output_fn(
            f"No words available to play. Check '{settings.word_file}' exists and contains 5-letter words."
        )
        return 1
    except EOFError:
        output_fn("\nBye.")
        return 0
    except KeyboardInterrupt:
        output_fn("\nBye.")
        return 130

    if played > 1:
        output_fn(render_stats(scoreboard.snapshot()))
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
