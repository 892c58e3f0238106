"""
Word Data Models

Contains the value returned by word sources.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class WordPick:
    """Secret word and optional hint supplied by a word source."""
    word: str
    hint: Optional[str] = None
    notice: Optional[str] = None  # One-line message when a fallback was used

    @property
    def is_fallback(self) -> bool:
        return self.notice is not None
