"""
Labels for clarity.
"""

from typing import Literal, Tuple

WORD_LENGTH = 5

Word = str  # 5 uppercase letters, e.g. "CRANE"
Mark = Literal["exact", "present", "absent"]
Verdict = Tuple[Mark, ...]  # one mark per guess position
RoundStatus = Literal["pending", "won", "lost"]
RandomSourceName = Literal["local", "randomorg"]
