"""
Explicit validation & Pydantic models
- WordIn turns raw player / word-list text into a canonical Word.
- RoundResult and StatsOut describe what the reporter and the scoreboard hand out.
"""

from typing import Dict, Literal, Optional
from pydantic import BaseModel, Field, ValidationError, field_validator

from .types import WORD_LENGTH, Word

# 1. Validates one raw word (a typed guess or a word-list line)
class WordIn(BaseModel):
    word: str = Field(..., description="Five letters; case and surrounding spaces are ignored")

    @field_validator("word")
    @classmethod
    def normalize_letters(cls, raw: str) -> str:
        """
        Strip and uppercase first, then check the shape.
        Only single alphabetic symbols count as letters.
        """
        text = raw.strip().upper()
        if len(text) != WORD_LENGTH:
            raise ValueError(f"Must be exactly {WORD_LENGTH} letters.")
        if not text.isalpha():
            raise ValueError("Only letters are allowed.")
        return text

    model_config = {"frozen": True}


def parse_word(raw: str) -> Word:
    """Return the canonical Word for raw text, or raise pydantic's ValidationError."""
    return WordIn(word=raw).word


def is_valid_word(raw: str) -> bool:
    try:
        parse_word(raw)
    except ValidationError:
        return False
    return True

# 2. Final outcome of one round, handed to the reporter exactly once
class RoundResult(BaseModel):
    status: Literal["won", "lost"] = Field(..., description="How the round ended")
    attempts_used: int = Field(..., description="Guesses consumed, including the winning one")
    secret: Word = Field(..., description="The secret word (always revealed once the round is over)")

# 3. Scoreboard snapshot for the current process
class StatsOut(BaseModel):
    rounds_started: int = Field(..., description="Rounds started this session")
    rounds_won: int = Field(..., description="Rounds won this session")
    rounds_lost: int = Field(..., description="Rounds lost this session")

    current_streak: int = Field(..., description="Current consecutive wins")
    best_streak: int = Field(..., description="Best consecutive wins")

    average_guesses_to_win: Optional[float] = Field(
        None, description="Average number of guesses used in wins"
    )
    fastest_win_attempts: Optional[int] = Field(
        None, description="Fewest guesses taken to win a round"
    )
    guess_distribution: Dict[int, int] = Field(
        default_factory=dict, description="Wins keyed by the attempt they happened on"
    )
