"""
Single place to:
- Load env vars from .env if present
- Read the WORDLE_* settings with their defaults
- Reject values that would make a round impossible

Command-line flags are passed in as overrides and win over the environment.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, get_args

from dotenv import load_dotenv

from .errors import InvalidConfiguration
from .types import RandomSourceName

# dev convenience; a real shell environment still takes precedence
load_dotenv()

DEFAULT_WORD_FILE = Path(__file__).resolve().parent / "data" / "words.txt"
DEFAULT_MAX_ATTEMPTS = 6
RANDOM_SOURCES = get_args(RandomSourceName)
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    word_file: Path = DEFAULT_WORD_FILE
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    random_source: str = "local"
    seed: Optional[int] = None
    log_level: str = "WARNING"


def _as_int(name: str, value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}.") from None


def get_settings(
    word_file=None,
    max_attempts=None,
    random_source=None,
    seed=None,
    log_level=None,
) -> Settings:
    """Merge overrides with the environment and validate the result."""
    if word_file is None:
        word_file = os.getenv("WORDLE_WORD_FILE") or DEFAULT_WORD_FILE

    if max_attempts is None:
        max_attempts = os.getenv("WORDLE_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS)
    max_attempts = _as_int("WORDLE_MAX_ATTEMPTS", max_attempts)
    if max_attempts < 1:
        raise InvalidConfiguration(f"max_attempts must be at least 1, got {max_attempts}.")

    if random_source is None:
        random_source = os.getenv("WORDLE_RANDOM_SOURCE", "local")
    random_source = random_source.strip().lower()
    if random_source not in RANDOM_SOURCES:
        raise InvalidConfiguration(
            f"random source must be one of {', '.join(RANDOM_SOURCES)}, got {random_source!r}."
        )

    if seed is None:
        seed = os.getenv("WORDLE_SEED") or None
    if seed is not None:
        seed = _as_int("WORDLE_SEED", seed)

    if log_level is None:
        log_level = os.getenv("WORDLE_LOG_LEVEL", "WARNING")
    log_level = log_level.strip().upper()
    if log_level not in LOG_LEVELS:
        raise InvalidConfiguration(f"log level must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}.")

    return Settings(
        word_file=Path(word_file),
        max_attempts=max_attempts,
        random_source=random_source,
        seed=seed,
        log_level=log_level,
    )
