"""
Errors raised by the game core.
The core never prints or swallows these; the CLI turns them into messages
and exit codes.
"""


class WordleError(Exception):
    """Base class for every error the game raises on purpose."""


class PoolExhausted(WordleError, LookupError):
    """draw() was called on a pool that holds no words."""


class InvalidInput(WordleError, ValueError):
    """The scorer was handed something that is not a 5-letter word."""


class InvalidConfiguration(WordleError, ValueError):
    """A setting is out of range (e.g. max_attempts < 1)."""
