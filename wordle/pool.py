"""
WordPool: the secret words still available in this process.

Filled once from raw word-list lines, then only shrinks. Every draw picks
uniformly among the words that are left and removes the pick, so no word is
drawn twice from the same pool. There is no locking; give each concurrent
game its own pool.
"""

import logging
from typing import Iterable, List, Optional

from pydantic import ValidationError

from .errors import PoolExhausted
from .random_client import LocalRandom
from .schemas import parse_word
from .types import Word

logger = logging.getLogger(__name__)


class WordPool:
    def __init__(self, words: Optional[List[Word]] = None, rng=None) -> None:
        self._words: List[Word] = list(words or [])
        self._rng = rng if rng is not None else LocalRandom()

    @classmethod
    def load(cls, raw_lines: Iterable[str], rng=None) -> "WordPool":
        """
        Keep every line that normalizes to a 5-letter word.
        Anything else is word-list noise and is dropped without complaint.
        """
        words: List[Word] = []
        skipped = 0
        for line in raw_lines:
            try:
                words.append(parse_word(line))
            except ValidationError:
                skipped += 1

        logger.debug("loaded %d words, skipped %d malformed lines", len(words), skipped)
        return cls(words, rng=rng)

    def draw(self) -> Word:
        if not self._words:
            raise PoolExhausted("No words left to draw from.")

        index = self._rng.randbelow(len(self._words))
        word = self._words.pop(index)
        logger.debug("drew a secret, %d words left", len(self._words))
        return word

    @property
    def remaining(self) -> List[Word]:
        return list(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words
