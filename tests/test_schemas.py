"""
Testing word validation.
"""

import pytest
from pydantic import ValidationError

from wordle.schemas import WordIn, is_valid_word, parse_word

@pytest.mark.parametrize("raw, expected", [
    ("crane", "CRANE"),
    ("  Slate\n", "SLATE"),
    ("HELLO", "HELLO"),
])
def test_parse_word_normalizes(raw, expected):
    assert parse_word(raw) == expected

@pytest.mark.parametrize("raw", ["", "BYE", "MORNING", "CR4NE", "CR NE", "KOTLIN"])
def test_parse_word_rejects(raw):
    with pytest.raises(ValidationError):
        parse_word(raw)
    assert is_valid_word(raw) is False

def test_word_model_is_frozen():
    word = WordIn(word="crane")
    with pytest.raises(ValidationError):
        word.word = "SLATE"

def test_word_model_config_is_only_frozen():
    assert WordIn.model_config.get("frozen") is True
    assert "json_schema_extra" not in WordIn.model_config
