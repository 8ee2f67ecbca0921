"""
Pluggable random sources for picking the secret word.

Anything with randbelow(n) -> int in [0, n) will do.
- LocalRandom: seedable random.Random, used by default and in tests.
- RandomOrgRandom: asks random.org for the index. If anything goes wrong (no internet,
  timeout, bad response), we fall back to a local secure random generator so the game still works.
"""

import logging
import random
from secrets import randbelow
from typing import Optional

import requests

from .errors import InvalidConfiguration

logger = logging.getLogger(__name__)

RANDOM_URL = "https://www.random.org/integers/"


class LocalRandom:
    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError("randbelow() needs a positive upper bound.")
        return self._rng.randrange(n)


class RandomOrgRandom:
    def __init__(self, timeout: float = 3.0) -> None:
        # keep network quick; if it takes too long, we will just fallback
        self.timeout = timeout

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError("randbelow() needs a positive upper bound.")
        if n == 1:
            return 0

        # Parameters to send to random.org
        params = {
            "num": 1,          # one index
            "min": 0,          # smallest allowed index
            "max": n - 1,      # largest allowed index
            "col": 1,          # one number per line
            "base": 10,        # normal decimal numbers
            "format": "plain", # plain text response
            "rnd": "new",      # always generate new numbers
        }

        try:
            response = requests.get(RANDOM_URL, params=params, timeout=self.timeout)

            # If the response was not 200 OK, this will raise an error
            response.raise_for_status()

            # The body looks like:  "17\n"
            value = int(response.text.strip())
            if value < 0 or value >= n:
                raise ValueError(f"random.org index {value} out of range 0..{n - 1}.")
            return value

        except (requests.RequestException, ValueError) as exc:
            # Fallback: secure local random, randbelow(n) gives 0..n-1
            logger.warning("random.org unavailable (%s); using local secure random", exc)
            return randbelow(n)


def make_random_source(name: str = "local", seed: Optional[int] = None):
    """Build the random source named in the settings."""
    if name == "local":
        return LocalRandom(seed)
    if name == "randomorg":
        if seed is not None:
            logger.warning("seed is ignored by the random.org source")
        return RandomOrgRandom()
    raise InvalidConfiguration(f"Unknown random source {name!r}; use 'local' or 'randomorg'.")
