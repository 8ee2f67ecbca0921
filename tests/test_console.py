"""
Testing terminal collaborators with fake input/output functions.
"""

import pytest

from wordle.console import (
    INVALID_GUESS_MESSAGE,
    ConsoleGuessSource,
    ConsoleReporter,
    read_word_list,
    render_stats,
    render_verdict,
)
from wordle.game import AttemptEntry
from wordle.schemas import RoundResult
from wordle.stats import Scoreboard

def test_guess_source_reprompts_until_valid():
    typed = iter(["bye", "morning", "cr4ne", " crane "])
    prompts, printed = [], []

    def fake_input(prompt):
        prompts.append(prompt)
        return next(typed)

    source = ConsoleGuessSource(input_fn=fake_input, output_fn=printed.append)
    assert source(2) == "CRANE"
    assert prompts == ["Attempt 2: "] * 4
    assert printed == [INVALID_GUESS_MESSAGE] * 3

def test_guess_source_lets_eof_through():
    def closed(prompt):
        raise EOFError

    with pytest.raises(EOFError):
        ConsoleGuessSource(input_fn=closed, output_fn=lambda s: None)(1)

def test_render_verdict():
    verdict = ("present", "present", "present", "absent", "present")
    assert render_verdict("TERRI", verdict) == "t e r ? i"
    assert render_verdict("CRANE", ("exact",) * 5) == "C R A N E"

def test_reporter_messages():
    printed = []
    reporter = ConsoleReporter(output_fn=printed.append)
    reporter.verdict(AttemptEntry(1, "ODDLY", ("present", "absent", "absent", "absent", "exact")))
    reporter.outcome(RoundResult(status="lost", attempts_used=6, secret="BOOZY"))
    reporter.outcome(RoundResult(status="won", attempts_used=3, secret="BOOZY"))

    assert printed[0] == "Hint: o ? ? ? Y"
    assert printed[1] == "Out of attempts. The word was: BOOZY"
    assert "BOOZY" in printed[2] and "attempt 3" in printed[2]

def test_read_word_list(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("HELLO\nWORLD\nKOTLIN\nTEST\n", encoding="utf-8")
    assert read_word_list(path) == ["HELLO", "WORLD", "KOTLIN", "TEST"]

def test_read_word_list_missing_file(tmp_path):
    assert read_word_list(tmp_path / "nope.txt") == []

def test_render_stats_empty_board():
    text = render_stats(Scoreboard().snapshot())
    assert "Played: 0" in text
    assert "Average" not in text
