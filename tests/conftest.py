"""
- Keep WORDLE_* variables from the developer's shell out of the tests.
- Provide a scripted guess source and a reporter that records what it was told,
  so rounds can be driven without a terminal.
"""
import pytest

from wordle.random_client import LocalRandom


class ScriptedGuesses:
    """Hands out guesses in order and remembers which attempt asked for each."""

    def __init__(self, guesses):
        self.guesses = list(guesses)
        self.asked = []

    def __call__(self, attempt):
        self.asked.append(attempt)
        return self.guesses[len(self.asked) - 1]


class RecordingReporter:
    def __init__(self):
        self.entries = []
        self.outcomes = []

    def verdict(self, entry):
        self.entries.append(entry)

    def outcome(self, result):
        self.outcomes.append(result)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "WORDLE_WORD_FILE",
        "WORDLE_MAX_ATTEMPTS",
        "WORDLE_RANDOM_SOURCE",
        "WORDLE_SEED",
        "WORDLE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def rng():
    # Same seed every test so draws are repeatable
    return LocalRandom(seed=1234)


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def scripted():
    return ScriptedGuesses
